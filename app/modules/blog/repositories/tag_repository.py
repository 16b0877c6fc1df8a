# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/repositories/tag_repository.py

Consultas de tags. El conteo de posts solo incluye posts publicados.

Autor: Equipo Tintero
Fecha: 2026-09-21
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.blog.models import Post, Tag, post_tags


class TagRepository(BaseRepository[Tag]):
    def __init__(self) -> None:
        super().__init__(Tag)

    def _published_count(self):
        return (
            select(func.count(post_tags.c.post_id))
            .select_from(post_tags.join(Post, Post.id == post_tags.c.post_id))
            .where(post_tags.c.tag_id == Tag.id, Post.published.is_(True))
            .correlate(Tag)
            .scalar_subquery()
        )

    async def list_with_counts(self, session: AsyncSession) -> List[Tuple[Tag, int]]:
        result = await session.execute(
            select(Tag, self._published_count()).order_by(Tag.name.asc())
        )
        return [(row[0], int(row[1] or 0)) for row in result.all()]

    async def count_published_posts(self, session: AsyncSession, tag_id: int) -> int:
        result = await session.execute(
            select(func.count(post_tags.c.post_id))
            .select_from(post_tags.join(Post, Post.id == post_tags.c.post_id))
            .where(post_tags.c.tag_id == tag_id, Post.published.is_(True))
        )
        return int(result.scalar_one() or 0)

    async def get_many(self, session: AsyncSession, ids: Sequence[int]) -> List[Tag]:
        if not ids:
            return []
        result = await session.execute(select(Tag).where(Tag.id.in_(set(ids))))
        return list(result.scalars().all())

    async def get_by_name(self, session: AsyncSession, name: str) -> Optional[Tag]:
        result = await session.execute(select(Tag).where(Tag.name == name))
        return result.scalars().first()

    async def name_taken(self, session: AsyncSession, name: str, *, exclude_id: Any = None) -> bool:
        existing = await self.get_by_name(session, name)
        return existing is not None and existing.id != exclude_id


tag_repository = TagRepository()

__all__ = ["TagRepository", "tag_repository"]
