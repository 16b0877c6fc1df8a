# -*- coding: utf-8 -*-
"""
backend/app/shared/database/repository.py

Repositorio base para operaciones async con SQLAlchemy.

Además del CRUD común, expone las consultas de slug que necesitan los
recursos direccionables por URL (posts, categorías, tags):
- get_by_slug(): lectura pública
- slug_taken(): oráculo de ocupación, con exclusión opcional de una fila

Autor: Equipo Tintero
Fecha: 2026-09-15
"""

from typing import Any, Type, TypeVar, Generic, Sequence, Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base para CRUD común."""

    def __init__(self, model: Type[T], slug_field: str = "slug"):
        self.model = model
        self.slug_field = slug_field

    # -------------------------------------------------------------
    # CRUD básico
    # -------------------------------------------------------------
    async def get(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        return await session.get(self.model, obj_id)

    async def list(self, session: AsyncSession) -> Sequence[T]:
        result = await session.execute(select(self.model))
        return result.scalars().all()

    async def create(self, session: AsyncSession, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> None:
        await session.delete(obj)
        await session.flush()

    # -------------------------------------------------------------
    # Slugs
    # -------------------------------------------------------------
    async def get_by_slug(self, session: AsyncSession, slug: str) -> Optional[T]:
        column = getattr(self.model, self.slug_field)
        result = await session.execute(select(self.model).where(column == slug))
        return result.scalars().first()

    async def slug_taken(
        self,
        session: AsyncSession,
        slug: str,
        *,
        exclude_id: Any = None,
    ) -> bool:
        """
        True si alguna fila (distinta de exclude_id) ya usa `slug`.
        """
        column = getattr(self.model, self.slug_field)
        cond = column == slug
        if exclude_id is not None:
            cond = cond & (self.model.id != exclude_id)  # type: ignore[attr-defined]
        result = await session.execute(select(exists().where(cond)))
        return bool(result.scalar())

# Fin del archivo backend/app/shared/database/repository.py
