# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/repositories/__init__.py
"""

from .todo_repository import TodoRepository, todo_repository

__all__ = ["TodoRepository", "todo_repository"]
