# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/repositories/post_repository.py

Consultas de posts: listado público paginado, lectura por slug y
recarga completa (autor/categoría/tags) tras una escritura.

Autor: Equipo Tintero
Fecha: 2026-09-21
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.blog.models import Post, post_tags


@dataclass(frozen=True)
class PostFilters:
    category_id: Optional[int] = None
    tag_id: Optional[int] = None
    search: Optional[str] = None


class PostRepository(BaseRepository[Post]):
    def __init__(self) -> None:
        super().__init__(Post)

    def _published_where(self, filters: PostFilters) -> list:
        conds = [Post.published.is_(True), Post.published_at.is_not(None)]
        if filters.category_id is not None:
            conds.append(Post.category_id == filters.category_id)
        if filters.tag_id is not None:
            conds.append(
                Post.id.in_(select(post_tags.c.post_id).where(post_tags.c.tag_id == filters.tag_id))
            )
        if filters.search:
            pattern = f"%{filters.search}%"
            conds.append(
                or_(
                    Post.title.ilike(pattern),
                    Post.content.ilike(pattern),
                    Post.excerpt.ilike(pattern),
                )
            )
        return conds

    async def list_published(
        self,
        session: AsyncSession,
        filters: PostFilters,
        *,
        page: int,
        limit: int,
    ) -> Tuple[List[Post], int]:
        """Página de posts publicados (más recientes primero) + total."""
        conds = self._published_where(filters)

        total = (
            await session.execute(select(func.count(Post.id)).where(*conds))
        ).scalar_one()

        result = await session.execute(
            select(Post)
            .where(*conds)
            .order_by(Post.published_at.desc(), Post.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return list(result.scalars().all()), int(total or 0)

    async def get_by_slug_full(self, session: AsyncSession, slug: str) -> Optional[Post]:
        result = await session.execute(
            select(Post)
            .where(Post.slug == slug)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def get_full(self, session: AsyncSession, post_id: int) -> Optional[Post]:
        """Recarga el post y sus relaciones desde la BD (ignora el identity map)."""
        result = await session.execute(
            select(Post)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()


post_repository = PostRepository()

__all__ = ["PostRepository", "PostFilters", "post_repository"]
