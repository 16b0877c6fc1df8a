# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/routes/posts_routes.py

Endpoints de posts:
- GET    /posts           → listado público paginado (filtros category/tag/search)
- POST   /posts           → crear (auth)
- GET    /posts/{slug}    → detalle (borradores solo para su autor)
- PUT    /posts/{slug}    → actualización parcial (solo autor)
- DELETE /posts/{slug}    → borrar (solo autor)

Autor: Equipo Tintero
Fecha: 2026-09-24
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.dependencies import get_current_user, get_optional_user
from app.modules.auth.models.user_models import User
from app.modules.blog.facades import posts as posts_facade
from app.modules.blog.repositories import PostFilters
from app.modules.blog.schemas import (
    MessageResponse,
    Pagination,
    PostCreate,
    PostEnvelope,
    PostListItem,
    PostListResponse,
    PostRead,
    PostUpdate,
)

from .deps import HANDLED_ERRORS, PageParams, get_page_params, to_http

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListResponse, summary="Listar posts publicados")
async def list_posts(
    pagination: PageParams = Depends(get_page_params),
    category: Optional[int] = Query(None, ge=1, description="ID de categoría"),
    tag: Optional[int] = Query(None, ge=1, description="ID de tag"),
    search: Optional[str] = Query(None, max_length=200, description="Texto en título, contenido o extracto"),
    db: AsyncSession = Depends(get_db),
) -> PostListResponse:
    filters = PostFilters(category_id=category, tag_id=tag, search=(search or "").strip() or None)
    items, total = await posts_facade.list_published(
        db, filters, page=pagination.page, limit=pagination.limit
    )
    return PostListResponse(
        posts=[PostListItem.model_validate(p) for p in items],
        pagination=Pagination.build(page=pagination.page, limit=pagination.limit, total=total),
    )


@router.post(
    "",
    response_model=PostEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Crear post",
)
async def create_post(
    payload: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> PostEnvelope:
    """
    El slug se deriva del título; si ya existe se añade sufijo (-1, -2, ...).
    """
    try:
        post = await posts_facade.create(db, author_id=user.id, data=payload)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return PostEnvelope(post=PostRead.model_validate(post))


@router.get("/{slug}", response_model=PostEnvelope, summary="Obtener post por slug")
async def get_post(
    slug: str,
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
) -> PostEnvelope:
    try:
        post = await posts_facade.get_visible(db, slug, viewer.id if viewer else None)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return PostEnvelope(post=PostRead.model_validate(post))


@router.put("/{slug}", response_model=PostEnvelope, summary="Actualizar post")
async def update_post(
    slug: str,
    payload: PostUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> PostEnvelope:
    """
    Si cambia el título y su slug normalizado difiere del actual,
    el post recibe un slug nuevo (la respuesta lo incluye).
    """
    try:
        post = await posts_facade.update(db, slug, user_id=user.id, changes=payload.changes())
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return PostEnvelope(post=PostRead.model_validate(post))


@router.delete("/{slug}", response_model=MessageResponse, summary="Eliminar post")
async def delete_post(
    slug: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    try:
        await posts_facade.delete(db, slug, user_id=user.id)
    except HANDLED_ERRORS as e:
        raise to_http(e)
    return MessageResponse(message="Post eliminado")

# Fin del archivo backend/app/modules/blog/routes/posts_routes.py
