# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/user_repository.py

Repositorio de acceso a datos para User.
Encapsula consultas frecuentes sobre la tabla users, dejando la lógica
de negocio en los servicios superiores.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models.user_models import User


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class UserRepository:
    """Repositorio de usuarios."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_id(self, user_id: int) -> Optional[User]:
        return await self._db.get(User, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Obtiene un usuario por email (comparación en minúsculas).
        Devuelve None si no existe.
        """
        norm_email = normalize_email(email)
        if not norm_email:
            return None

        stmt = select(User).where(func.lower(User.email) == norm_email)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def email_taken(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        """True si otro usuario (distinto de exclude_id) ya usa el email."""
        norm_email = normalize_email(email)
        stmt = select(func.count()).select_from(User).where(func.lower(User.email) == norm_email)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self._db.execute(stmt)
        return (result.scalar_one() or 0) > 0

    # ------------------------------------------------------------------
    # Escrituras (sin commit: lo controla el servicio)
    # ------------------------------------------------------------------
    async def add(self, user: User) -> User:
        self._db.add(user)
        await self._db.flush()
        return user


__all__ = ["UserRepository", "normalize_email"]
# Fin del archivo backend/app/modules/auth/repositories/user_repository.py
