# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/schemas/__init__.py
"""

from .todo_schemas import (
    MessageResponse,
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoRead,
    TodoUpdate,
)

__all__ = [
    "TodoCreate",
    "TodoUpdate",
    "TodoRead",
    "TodoEnvelope",
    "TodoListResponse",
    "MessageResponse",
]
