# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/models/__init__.py
"""

from .todo_models import Todo

__all__ = ["Todo"]
