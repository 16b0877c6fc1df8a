# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/enums/todo_enums.py

Estados y prioridades de una tarea.

Autor: Equipo Tintero
Fecha: 2026-09-25
"""
from enum import StrEnum

from app.shared.database.base import as_db_enum


class TodoStatus(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TodoPriority(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


def todo_status_enum():
    return as_db_enum(TodoStatus, name="todo_status_enum")


def todo_priority_enum():
    return as_db_enum(TodoPriority, name="todo_priority_enum")


__all__ = ["TodoStatus", "TodoPriority", "todo_status_enum", "todo_priority_enum"]
