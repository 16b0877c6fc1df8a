# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/posts.py

Operaciones de posts: listado público, lectura, create, update, delete.

Reglas de negocio:
- Slug derivado del título (prefijo de fallback "post"), único en la tabla.
- Solo el autor puede editar o borrar su post.
- Anónimos ven solo posts publicados; el autor ve también sus borradores.
- published_at se fija en la primera publicación y se limpia al despublicar.
- tag_ids reemplaza el conjunto completo de tags.

Transacciones: write_with_slug_retry (resolver + escribir, reintento ante
colisión de slug) o commit_or_raise.

Autor: Equipo Tintero
Fecha: 2026-09-24
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.blog.models import Post, Tag
from app.modules.blog.repositories import (
    PostFilters,
    category_repository,
    post_repository,
    tag_repository,
)
from app.modules.blog.schemas import PostCreate
from app.shared.database.transactions import commit_or_raise, now_utc

from .base import resolve_slug, slug_needs_refresh, write_with_slug_retry
from .errors import InvalidReference, PermissionDenied, PostNotFound

logger = logging.getLogger(__name__)

ENTITY = "post"

# Campos escalares que update() copia tal cual
ALLOWED_UPDATE_FIELDS: Set[str] = {
    "title",
    "content",
    "excerpt",
    "cover_image",
    "category_id",
}


def is_visible(post: Post, viewer_id: Optional[int]) -> bool:
    if post.published and post.published_at is not None:
        return True
    return viewer_id is not None and post.author_id == viewer_id


async def _check_category(db: AsyncSession, category_id: Optional[int]) -> None:
    if category_id is not None and await category_repository.get(db, category_id) is None:
        raise InvalidReference("La categoría indicada no existe")


async def _load_tags(db: AsyncSession, tag_ids: Sequence[int]) -> List[Tag]:
    tags = await tag_repository.get_many(db, tag_ids)
    if len(tags) != len(set(tag_ids)):
        raise InvalidReference("Uno o más tags indicados no existen")
    return tags


async def _get_for_update(db: AsyncSession, slug: str, user_id: int) -> Post:
    post = await post_repository.get_by_slug_full(db, slug)
    if post is None:
        raise PostNotFound(slug)
    if post.author_id != user_id:
        raise PermissionDenied(f"Usuario {user_id} no es autor del post {slug}")
    return post


async def _reload(db: AsyncSession, post_id: int) -> Post:
    post = await post_repository.get_full(db, post_id)
    if post is None:  # pragma: no cover - borrado concurrente
        raise PostNotFound(post_id)
    return post


# ---------------------------------------------------------------------------
# Lecturas
# ---------------------------------------------------------------------------

async def list_published(
    db: AsyncSession,
    filters: PostFilters,
    *,
    page: int,
    limit: int,
) -> Tuple[List[Post], int]:
    return await post_repository.list_published(db, filters, page=page, limit=limit)


async def get_visible(db: AsyncSession, slug: str, viewer_id: Optional[int] = None) -> Post:
    """
    Raises:
        PostNotFound: no existe o el visitante no puede verlo
    """
    post = await post_repository.get_by_slug_full(db, slug)
    if post is None or not is_visible(post, viewer_id):
        raise PostNotFound(slug)
    return post


# ---------------------------------------------------------------------------
# Escrituras
# ---------------------------------------------------------------------------

async def create(db: AsyncSession, *, author_id: int, data: PostCreate) -> Post:
    """
    Crea un post del autor indicado.

    Raises:
        InvalidReference: category_id o tag_ids inexistentes
        InvalidInputError / SlugGenerationExhaustedError: del generador de slugs
        SlugConflict: colisiones de slug persistentes en commit
    """
    values = data.to_values()

    async def _work() -> int:
        await _check_category(db, values["category_id"])
        tags = await _load_tags(db, values["tag_ids"])

        slug = await resolve_slug(db, post_repository, values["title"], entity=ENTITY)
        post = Post(
            title=values["title"],
            slug=slug,
            content=values["content"],
            excerpt=values["excerpt"],
            cover_image=values["cover_image"],
            published=values["published"],
            published_at=now_utc() if values["published"] else None,
            author_id=author_id,
            category_id=values["category_id"],
            tags=tags,
        )
        db.add(post)
        await db.flush()
        return post.id

    post_id = await write_with_slug_retry(db, _work, entity=ENTITY, table="posts")
    logger.info("post_created id=%s author_id=%s", post_id, author_id)
    return await _reload(db, post_id)


async def update(db: AsyncSession, slug: str, *, user_id: int, changes: Dict[str, Any]) -> Post:
    """
    Actualización parcial de un post propio.

    `changes` trae solo los campos enviados por el cliente (exclude_unset).

    Raises:
        PostNotFound, PermissionDenied, InvalidReference, SlugConflict
    """
    async def _work() -> int:
        post = await _get_for_update(db, slug, user_id)

        if "category_id" in changes:
            await _check_category(db, changes["category_id"])
        tags = await _load_tags(db, changes["tag_ids"]) if "tag_ids" in changes else None

        new_title = changes.get("title")
        if slug_needs_refresh(post.slug, post.title, new_title):
            post.slug = await resolve_slug(
                db, post_repository, new_title, entity=ENTITY, exclude_id=post.id
            )

        for key in ALLOWED_UPDATE_FIELDS.intersection(changes):
            setattr(post, key, changes[key])

        if "published" in changes:
            published = bool(changes["published"])
            if published and post.published_at is None:
                post.published_at = now_utc()
            if not published:
                post.published_at = None
            post.published = published

        if tags is not None:
            post.tags = tags

        await db.flush()
        return post.id

    post_id = await write_with_slug_retry(db, _work, entity=ENTITY, table="posts")
    logger.info("post_updated id=%s fields=%s", post_id, sorted(changes))
    return await _reload(db, post_id)


async def delete(db: AsyncSession, slug: str, *, user_id: int) -> None:
    async def _work() -> None:
        post = await _get_for_update(db, slug, user_id)
        await post_repository.delete(db, post)

    await commit_or_raise(db, _work)
    logger.info("post_deleted slug=%s", slug)


__all__ = [
    "ALLOWED_UPDATE_FIELDS",
    "is_visible",
    "list_published",
    "get_visible",
    "create",
    "update",
    "delete",
]

# Fin del archivo backend/app/modules/blog/facades/posts.py
