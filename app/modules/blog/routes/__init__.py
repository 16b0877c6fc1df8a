# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/routes/__init__.py

Routers del módulo Blog (posts, categorías, tags).
Se importa desde master_routes.py para montar bajo /api.

Autor: Equipo Tintero
Fecha: 2026-09-24
"""

from fastapi import APIRouter

from .posts_routes import router as posts_router
from .categories_routes import router as categories_router
from .tags_routes import router as tags_router


def get_blog_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [posts_router, categories_router, tags_router]


__all__ = ["get_blog_routers"]
