# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/enums/__init__.py
"""

from .todo_enums import TodoPriority, TodoStatus, todo_priority_enum, todo_status_enum

__all__ = ["TodoStatus", "TodoPriority", "todo_status_enum", "todo_priority_enum"]
