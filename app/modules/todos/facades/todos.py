# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/facades/todos.py

Operaciones de todos: list, create, get, update, delete.

Todas las operaciones reciben el user_id del solicitante; un todo ajeno
se comporta igual que uno inexistente (TodoNotFound).

Autor: Equipo Tintero
Fecha: 2026-09-25
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Set

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.transactions import commit_or_raise, now_utc
from app.modules.todos.enums import TodoPriority, TodoStatus
from app.modules.todos.models import Todo
from app.modules.todos.repositories import todo_repository
from app.modules.todos.schemas import TodoCreate

from .errors import TodoNotFound

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS: Set[str] = {"title", "description", "status", "priority", "due_date"}


def apply_status(todo: Todo, new_status: TodoStatus) -> None:
    """Cambia el estado manteniendo completed_at coherente."""
    if new_status == todo.status:
        return
    if new_status == TodoStatus.DONE:
        todo.completed_at = now_utc()
    elif todo.status == TodoStatus.DONE:
        todo.completed_at = None
    todo.status = new_status


async def _get_owned(db: AsyncSession, todo_id: int, user_id: int) -> Todo:
    todo = await todo_repository.get_owned(db, todo_id, user_id)
    if todo is None:
        raise TodoNotFound(todo_id)
    return todo


async def list_todos(
    db: AsyncSession,
    user_id: int,
    *,
    status: Optional[TodoStatus] = None,
    priority: Optional[TodoPriority] = None,
) -> Sequence[Todo]:
    return await todo_repository.list_for_user(db, user_id, status=status, priority=priority)


async def get(db: AsyncSession, todo_id: int, *, user_id: int) -> Todo:
    return await _get_owned(db, todo_id, user_id)


async def create(db: AsyncSession, *, user_id: int, data: TodoCreate) -> Todo:
    async def _work() -> Todo:
        return await todo_repository.create(
            db,
            user_id=user_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            due_date=data.due_date,
            status=TodoStatus.TODO,
        )

    todo = await commit_or_raise(db, _work)
    logger.info("todo_created id=%s user_id=%s", todo.id, user_id)
    return todo


async def update(db: AsyncSession, todo_id: int, *, user_id: int, changes: Dict[str, Any]) -> Todo:
    changes = {k: v for k, v in changes.items() if k in ALLOWED_UPDATE_FIELDS}

    async def _work() -> Todo:
        todo = await _get_owned(db, todo_id, user_id)
        if "status" in changes:
            apply_status(todo, changes.pop("status"))
        for field, value in changes.items():
            setattr(todo, field, value)
        await db.flush()
        return todo

    todo = await commit_or_raise(db, _work)
    await db.refresh(todo)
    return todo


async def delete(db: AsyncSession, todo_id: int, *, user_id: int) -> None:
    async def _work() -> None:
        todo = await _get_owned(db, todo_id, user_id)
        await todo_repository.delete(db, todo)

    await commit_or_raise(db, _work)
    logger.info("todo_deleted id=%s user_id=%s", todo_id, user_id)


__all__ = ["list_todos", "get", "create", "update", "delete", "apply_status", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/todos/facades/todos.py
