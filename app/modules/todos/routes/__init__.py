# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/routes/__init__.py
"""

from fastapi import APIRouter

from .todos_routes import router as todos_router


def get_todos_routers() -> list[APIRouter]:
    return [todos_router]


__all__ = ["get_todos_routers"]
