# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/repositories/todo_repository.py

Consultas de todos acotadas siempre al usuario dueño.

Orden del listado:
1. prioridad (HIGH, MEDIUM, LOW)
2. fecha límite ascendente, sin fecha al final
3. creación descendente

Autor: Equipo Tintero
Fecha: 2026-09-25
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.todos.enums import TodoPriority, TodoStatus
from app.modules.todos.models import Todo

_PRIORITY_RANK = case(
    (Todo.priority == TodoPriority.HIGH, 0),
    (Todo.priority == TodoPriority.MEDIUM, 1),
    else_=2,
)


class TodoRepository(BaseRepository[Todo]):
    def __init__(self) -> None:
        super().__init__(Todo)

    async def list_for_user(
        self,
        session: AsyncSession,
        user_id: int,
        *,
        status: Optional[TodoStatus] = None,
        priority: Optional[TodoPriority] = None,
    ) -> Sequence[Todo]:
        stmt = select(Todo).where(Todo.user_id == user_id)
        if status is not None:
            stmt = stmt.where(Todo.status == status)
        if priority is not None:
            stmt = stmt.where(Todo.priority == priority)
        stmt = stmt.order_by(
            _PRIORITY_RANK,
            Todo.due_date.is_(None),
            Todo.due_date.asc(),
            Todo.created_at.desc(),
            Todo.id.desc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_owned(self, session: AsyncSession, todo_id: int, user_id: int) -> Optional[Todo]:
        """None si no existe o pertenece a otro usuario (ambos casos son 404)."""
        result = await session.execute(
            select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
        )
        return result.scalars().first()


todo_repository = TodoRepository()

__all__ = ["TodoRepository", "todo_repository"]
