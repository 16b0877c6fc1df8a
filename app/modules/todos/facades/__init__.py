# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/facades/__init__.py
"""

from . import todos
from .errors import TodoError, TodoNotFound

__all__ = ["todos", "TodoError", "TodoNotFound"]
