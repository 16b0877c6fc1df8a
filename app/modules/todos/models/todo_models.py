# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/models/todo_models.py

Tareas personales. Cada todo pertenece a un único usuario y solo él
puede verlo o modificarlo.

completed_at se fija al pasar a DONE y se limpia al salir de DONE.

Autor: Equipo Tintero
Fecha: 2026-09-25
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.shared.database.transactions import now_utc
from app.modules.todos.enums import TodoPriority, TodoStatus, todo_priority_enum, todo_status_enum


class Todo(Base):
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[TodoStatus] = mapped_column(
        todo_status_enum(), nullable=False, default=TodoStatus.TODO, server_default=TodoStatus.TODO.value
    )
    priority: Mapped[TodoPriority] = mapped_column(
        todo_priority_enum(), nullable=False, default=TodoPriority.MEDIUM, server_default=TodoPriority.MEDIUM.value
    )

    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index("ix_todos_user_id_status", "user_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Todo id={self.id} user_id={self.user_id} status={self.status}>"


__all__ = ["Todo"]
# Fin del archivo backend/app/modules/todos/models/todo_models.py
