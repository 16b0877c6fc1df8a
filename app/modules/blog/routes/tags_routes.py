# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/routes/tags_routes.py

Endpoints de tags (escritura requiere autenticación).
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.dependencies import get_current_user
from app.modules.blog.facades import tags as tags_facade
from app.modules.blog.schemas import (
    MessageResponse,
    TagCreate,
    TagEnvelope,
    TagListResponse,
    TagUpdate,
)

from .deps import HANDLED_ERRORS, to_http

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=TagListResponse, summary="Listar tags")
async def list_tags(db: AsyncSession = Depends(get_db)) -> TagListResponse:
    return TagListResponse(tags=await tags_facade.list_tags(db))


@router.post(
    "",
    response_model=TagEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Crear tag",
    dependencies=[Depends(get_current_user)],
)
async def create_tag(payload: TagCreate, db: AsyncSession = Depends(get_db)) -> TagEnvelope:
    try:
        tag = await tags_facade.create(db, name=payload.name)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return TagEnvelope(tag=tag)


@router.put(
    "/{tag_id}",
    response_model=TagEnvelope,
    summary="Actualizar tag",
    dependencies=[Depends(get_current_user)],
)
async def update_tag(
    payload: TagUpdate,
    tag_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
) -> TagEnvelope:
    try:
        tag = await tags_facade.update(db, tag_id, **payload.changes())
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return TagEnvelope(tag=tag)


@router.delete(
    "/{tag_id}",
    response_model=MessageResponse,
    summary="Eliminar tag",
    dependencies=[Depends(get_current_user)],
)
async def delete_tag(tag_id: int = Path(..., ge=1), db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await tags_facade.delete(db, tag_id)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return MessageResponse(message="Tag eliminado")
