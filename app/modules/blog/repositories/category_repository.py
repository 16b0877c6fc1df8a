# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/repositories/category_repository.py

Consultas de categorías (con conteo de posts asociados).

Autor: Equipo Tintero
Fecha: 2026-09-21
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.blog.models import Category, Post


class CategoryRepository(BaseRepository[Category]):
    def __init__(self) -> None:
        super().__init__(Category)

    async def list_with_counts(self, session: AsyncSession) -> List[Tuple[Category, int]]:
        """Categorías por nombre con el número de posts (publicados o no)."""
        post_count = (
            select(func.count(Post.id))
            .where(Post.category_id == Category.id)
            .correlate(Category)
            .scalar_subquery()
        )
        result = await session.execute(
            select(Category, post_count).order_by(Category.name.asc())
        )
        return [(row[0], int(row[1] or 0)) for row in result.all()]

    async def count_posts(self, session: AsyncSession, category_id: int) -> int:
        result = await session.execute(
            select(func.count(Post.id)).where(Post.category_id == category_id)
        )
        return int(result.scalar_one() or 0)

    async def get_by_name(self, session: AsyncSession, name: str) -> Optional[Category]:
        result = await session.execute(select(Category).where(Category.name == name))
        return result.scalars().first()

    async def name_taken(self, session: AsyncSession, name: str, *, exclude_id: Any = None) -> bool:
        existing = await self.get_by_name(session, name)
        return existing is not None and existing.id != exclude_id


category_repository = CategoryRepository()

__all__ = ["CategoryRepository", "category_repository"]
