# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/categories.py

Operaciones de categorías: list, create, update, delete.

Reglas:
- name único (409); slug derivado del nombre con prefijo de fallback "category"
- rename: recalcula slug solo si la forma normalizada cambia
  (el oráculo excluye la propia categoría)
- delete: bloqueado si hay posts asociados

Transacciones: write_with_slug_retry / commit_or_raise.

Autor: Equipo Tintero
Fecha: 2026-09-23
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.blog.models import Category
from app.modules.blog.repositories import category_repository
from app.modules.blog.schemas import CategoryRead
from app.shared.database.transactions import commit_or_raise

from .base import is_unique_violation, resolve_slug, slug_needs_refresh, write_with_slug_retry
from .errors import CategoryInUse, CategoryNotFound, NameAlreadyExists

logger = logging.getLogger(__name__)

ENTITY = "category"

# Lista blanca de campos permitidos en update()
ALLOWED_UPDATE_FIELDS: Set[str] = {"name", "description"}


def _to_read(category: Category, post_count: int) -> CategoryRead:
    return CategoryRead(
        id=category.id,
        name=category.name,
        slug=category.slug,
        description=category.description,
        post_count=post_count,
    )


async def _get_for_update(db: AsyncSession, category_id: int) -> Category:
    category = await db.get(Category, category_id, with_for_update=True, populate_existing=True)
    if category is None:
        raise CategoryNotFound(category_id)
    return category


async def list_categories(db: AsyncSession) -> List[CategoryRead]:
    rows = await category_repository.list_with_counts(db)
    return [_to_read(category, count) for category, count in rows]


async def create(db: AsyncSession, *, name: str, description: Optional[str] = None) -> CategoryRead:
    """
    Crea una categoría.

    Raises:
        NameAlreadyExists: nombre en uso (pre-check o UNIQUE en commit)
        SlugConflict: colisiones de slug persistentes
    """
    if await category_repository.name_taken(db, name):
        raise NameAlreadyExists(ENTITY, name)

    async def _work() -> Category:
        slug = await resolve_slug(db, category_repository, name, entity=ENTITY)
        category = Category(name=name, slug=slug, description=description or None)
        db.add(category)
        await db.flush()
        return category

    try:
        category = await write_with_slug_retry(db, _work, entity=ENTITY, table="categories")
    except IntegrityError as e:
        if is_unique_violation(e, "categories", "name"):
            raise NameAlreadyExists(ENTITY, name)
        raise

    logger.info("category_created id=%s slug=%s", category.id, category.slug)
    return _to_read(category, 0)


async def update(db: AsyncSession, category_id: int, **changes: Any) -> CategoryRead:
    """
    Actualiza nombre y/o descripción (description=None la limpia).
    """
    changes = {k: v for k, v in changes.items() if k in ALLOWED_UPDATE_FIELDS}
    new_name: Optional[str] = changes.get("name")

    async def _work() -> Category:
        category = await _get_for_update(db, category_id)

        if new_name is not None and new_name != category.name:
            if await category_repository.name_taken(db, new_name, exclude_id=category.id):
                raise NameAlreadyExists(ENTITY, new_name)

        if slug_needs_refresh(category.slug, category.name, new_name):
            category.slug = await resolve_slug(
                db, category_repository, new_name, entity=ENTITY, exclude_id=category.id
            )

        if new_name is not None:
            category.name = new_name
        if "description" in changes:
            category.description = changes["description"] or None

        await db.flush()
        return category

    try:
        category = await write_with_slug_retry(db, _work, entity=ENTITY, table="categories")
    except IntegrityError as e:
        if is_unique_violation(e, "categories", "name"):
            raise NameAlreadyExists(ENTITY, new_name or "")
        raise

    post_count = await category_repository.count_posts(db, category.id)
    return _to_read(category, post_count)


async def delete(db: AsyncSession, category_id: int) -> None:
    """
    Elimina una categoría sin posts.

    Raises:
        CategoryNotFound, CategoryInUse
    """
    async def _work() -> None:
        category = await _get_for_update(db, category_id)
        post_count = await category_repository.count_posts(db, category.id)
        if post_count > 0:
            raise CategoryInUse(category_id, post_count)
        await category_repository.delete(db, category)

    await commit_or_raise(db, _work)
    logger.info("category_deleted id=%s", category_id)


__all__ = ["list_categories", "create", "update", "delete", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/blog/facades/categories.py
