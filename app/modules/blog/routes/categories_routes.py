# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/routes/categories_routes.py

Endpoints de categorías (escritura requiere autenticación).

Autor: Equipo Tintero
Fecha: 2026-09-24
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.dependencies import get_current_user
from app.modules.blog.facades import categories as categories_facade
from app.modules.blog.schemas import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryUpdate,
    MessageResponse,
)

from .deps import HANDLED_ERRORS, to_http

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse, summary="Listar categorías")
async def list_categories(db: AsyncSession = Depends(get_db)) -> CategoryListResponse:
    return CategoryListResponse(categories=await categories_facade.list_categories(db))


@router.post(
    "",
    response_model=CategoryEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Crear categoría",
    dependencies=[Depends(get_current_user)],
)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db),
) -> CategoryEnvelope:
    try:
        category = await categories_facade.create(
            db, name=payload.name, description=payload.description
        )
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return CategoryEnvelope(category=category)


@router.put(
    "/{category_id}",
    response_model=CategoryEnvelope,
    summary="Actualizar categoría",
    dependencies=[Depends(get_current_user)],
)
async def update_category(
    payload: CategoryUpdate,
    category_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
) -> CategoryEnvelope:
    try:
        category = await categories_facade.update(db, category_id, **payload.changes())
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return CategoryEnvelope(category=category)


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Eliminar categoría",
    dependencies=[Depends(get_current_user)],
)
async def delete_category(
    category_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    try:
        await categories_facade.delete(db, category_id)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return MessageResponse(message="Categoría eliminada")

# Fin del archivo backend/app/modules/blog/routes/categories_routes.py
