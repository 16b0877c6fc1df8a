# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/schemas/todo_schemas.py

Schemas Pydantic de todos.

Autor: Equipo Tintero
Fecha: 2026-09-25
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, field_validator

from app.shared.utils.base_models import UTF8SafeModel, PartialUpdateModel, Field
from app.modules.todos.enums import TodoPriority, TodoStatus


class TodoCreate(UTF8SafeModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    priority: TodoPriority = TodoPriority.MEDIUM
    due_date: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Revisar borradores",
                "priority": "HIGH",
                "due_date": "2026-10-01T09:00:00Z",
            }
        }
    )


class TodoUpdate(PartialUpdateModel):
    """description y due_date aceptan null para limpiarse."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    due_date: Optional[datetime] = None

    @field_validator("title", "status", "priority")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("No puede ser null")
        return v


class TodoRead(UTF8SafeModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TodoStatus
    priority: TodoPriority
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class TodoEnvelope(UTF8SafeModel):
    todo: TodoRead


class TodoListResponse(UTF8SafeModel):
    todos: List[TodoRead]


class MessageResponse(UTF8SafeModel):
    message: str


__all__ = [
    "TodoCreate",
    "TodoUpdate",
    "TodoRead",
    "TodoEnvelope",
    "TodoListResponse",
    "MessageResponse",
]
