# -*- coding: utf-8 -*-
"""
backend/app/modules/todos/routes/todos_routes.py

Endpoints de todos (todos requieren autenticación):
- GET    /todos            → listado propio (filtros status/priority)
- POST   /todos            → crear (status TODO)
- GET    /todos/{todo_id}  → detalle
- PUT    /todos/{todo_id}  → actualización parcial
- DELETE /todos/{todo_id}  → borrar

Autor: Equipo Tintero
Fecha: 2026-09-25
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.dependencies import get_current_user_id
from app.modules.todos.enums import TodoPriority, TodoStatus
from app.modules.todos.facades import TodoNotFound
from app.modules.todos.facades import todos as todos_facade
from app.modules.todos.schemas import (
    MessageResponse,
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoRead,
    TodoUpdate,
)
from app.shared.utils.http_exceptions import NotFoundException

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=TodoListResponse, summary="Listar mis todos")
async def list_todos(
    status_filter: Optional[TodoStatus] = Query(None, alias="status"),
    priority: Optional[TodoPriority] = Query(None),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> TodoListResponse:
    items = await todos_facade.list_todos(db, user_id, status=status_filter, priority=priority)
    return TodoListResponse(todos=[TodoRead.model_validate(t) for t in items])


@router.post("", response_model=TodoEnvelope, status_code=status.HTTP_201_CREATED, summary="Crear todo")
async def create_todo(
    payload: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> TodoEnvelope:
    todo = await todos_facade.create(db, user_id=user_id, data=payload)
    return TodoEnvelope(todo=TodoRead.model_validate(todo))


@router.get("/{todo_id}", response_model=TodoEnvelope, summary="Obtener todo")
async def get_todo(
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> TodoEnvelope:
    try:
        todo = await todos_facade.get(db, todo_id, user_id=user_id)
    except TodoNotFound as e:
        raise NotFoundException(str(e))
    return TodoEnvelope(todo=TodoRead.model_validate(todo))


@router.put("/{todo_id}", response_model=TodoEnvelope, summary="Actualizar todo")
async def update_todo(
    payload: TodoUpdate,
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> TodoEnvelope:
    """
    Pasar a DONE fija completed_at; salir de DONE lo limpia.
    """
    try:
        todo = await todos_facade.update(db, todo_id, user_id=user_id, changes=payload.changes())
    except TodoNotFound as e:
        raise NotFoundException(str(e))
    return TodoEnvelope(todo=TodoRead.model_validate(todo))


@router.delete("/{todo_id}", response_model=MessageResponse, summary="Eliminar todo")
async def delete_todo(
    todo_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    try:
        await todos_facade.delete(db, todo_id, user_id=user_id)
    except TodoNotFound as e:
        raise NotFoundException(str(e))
    return MessageResponse(message="Todo eliminado")

# Fin del archivo backend/app/modules/todos/routes/todos_routes.py
