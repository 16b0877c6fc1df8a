# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/tags.py

Operaciones de tags: list, create, update, delete.
Mismas reglas que categorías; al borrar un tag se desvincula de sus posts.

Autor: Equipo Tintero
Fecha: 2026-09-23
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.blog.models import Tag, post_tags
from app.modules.blog.repositories import tag_repository
from app.modules.blog.schemas import TagRead
from app.shared.database.transactions import commit_or_raise

from .base import is_unique_violation, resolve_slug, slug_needs_refresh, write_with_slug_retry
from .errors import NameAlreadyExists, TagNotFound

logger = logging.getLogger(__name__)

ENTITY = "tag"


def _to_read(tag: Tag, post_count: int) -> TagRead:
    return TagRead(id=tag.id, name=tag.name, slug=tag.slug, post_count=post_count)


async def _get_for_update(db: AsyncSession, tag_id: int) -> Tag:
    tag = await db.get(Tag, tag_id, with_for_update=True, populate_existing=True)
    if tag is None:
        raise TagNotFound(tag_id)
    return tag


async def list_tags(db: AsyncSession) -> List[TagRead]:
    rows = await tag_repository.list_with_counts(db)
    return [_to_read(tag, count) for tag, count in rows]


async def create(db: AsyncSession, *, name: str) -> TagRead:
    if await tag_repository.name_taken(db, name):
        raise NameAlreadyExists(ENTITY, name)

    async def _work() -> Tag:
        slug = await resolve_slug(db, tag_repository, name, entity=ENTITY)
        tag = Tag(name=name, slug=slug)
        db.add(tag)
        await db.flush()
        return tag

    try:
        tag = await write_with_slug_retry(db, _work, entity=ENTITY, table="tags")
    except IntegrityError as e:
        if is_unique_violation(e, "tags", "name"):
            raise NameAlreadyExists(ENTITY, name)
        raise

    logger.info("tag_created id=%s slug=%s", tag.id, tag.slug)
    return _to_read(tag, 0)


async def update(db: AsyncSession, tag_id: int, *, name: Optional[str] = None) -> TagRead:
    async def _work() -> Tag:
        tag = await _get_for_update(db, tag_id)

        if name is not None and name != tag.name:
            if await tag_repository.name_taken(db, name, exclude_id=tag.id):
                raise NameAlreadyExists(ENTITY, name)

        if slug_needs_refresh(tag.slug, tag.name, name):
            tag.slug = await resolve_slug(db, tag_repository, name, entity=ENTITY, exclude_id=tag.id)

        if name is not None:
            tag.name = name

        await db.flush()
        return tag

    try:
        tag = await write_with_slug_retry(db, _work, entity=ENTITY, table="tags")
    except IntegrityError as e:
        if is_unique_violation(e, "tags", "name"):
            raise NameAlreadyExists(ENTITY, name or "")
        raise

    post_count = await tag_repository.count_published_posts(db, tag.id)
    return _to_read(tag, post_count)


async def delete(db: AsyncSession, tag_id: int) -> None:
    async def _work() -> None:
        tag = await _get_for_update(db, tag_id)
        await db.execute(sa_delete(post_tags).where(post_tags.c.tag_id == tag.id))
        await tag_repository.delete(db, tag)

    await commit_or_raise(db, _work)
    logger.info("tag_deleted id=%s", tag_id)


__all__ = ["list_tags", "create", "update", "delete"]

# Fin del archivo backend/app/modules/blog/facades/tags.py
