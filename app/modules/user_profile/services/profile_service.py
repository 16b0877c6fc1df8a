# -*- coding: utf-8 -*-
"""
backend/app/modules/user_profile/services/profile_service.py

Servicio para gestión del perfil de usuario en Tintero.

Funcionalidades:
- Edición de datos personales (nombre, correo, imagen, bio)
- Cambio de contraseña (verifica la actual, guarda hash de la nueva)

Dependencias esperadas (inyectables):
- AsyncSession (SQLAlchemy)
- PasswordHasher: verify(plain, hash) -> bool ; hash(plain) -> str

El usuario llega ya cargado desde la dependencia de autenticación.

Autor: Equipo Tintero
Fecha: 2026-09-20
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models.user_models import User
from app.modules.auth.repositories.user_repository import UserRepository
from app.shared.database.transactions import commit_or_raise

logger = logging.getLogger(__name__)

ALLOWED_PROFILE_FIELDS = {"name", "email", "image", "bio"}


# ============================
# Errores de dominio
# ============================

class ProfileError(Exception):
    """Base de errores del servicio de perfil."""


class EmailAlreadyInUse(ProfileError):
    def __init__(self, email: str):
        self.email = email
        super().__init__("El correo ya está en uso por otro usuario")


class InvalidCurrentPassword(ProfileError):
    def __init__(self):
        super().__init__("La contraseña actual no es correcta")


class PasswordNotSet(ProfileError):
    """Cuenta sin contraseña local (alta vía proveedor externo)."""

    def __init__(self):
        super().__init__("La cuenta no tiene contraseña local")


# ============================
# Protocolos
# ============================

class PasswordHasher(Protocol):
    def verify(self, plain_password: str, password_hash: Optional[str]) -> bool: ...
    def hash(self, plain_password: str) -> str: ...


# ============================
# Servicio
# ============================

@dataclass
class ProfileService:
    db: AsyncSession
    password_hasher: PasswordHasher

    # ---------- Perfil: edición ----------

    async def update_profile(self, user: User, changes: dict) -> User:
        changes = {k: v for k, v in changes.items() if k in ALLOWED_PROFILE_FIELDS}

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            if await UserRepository(self.db).email_taken(new_email, exclude_id=user.id):
                raise EmailAlreadyInUse(new_email)

        async def _work() -> User:
            for key, value in changes.items():
                setattr(user, key, value)
            await self.db.flush()
            return user

        try:
            updated = await commit_or_raise(self.db, _work)
        except IntegrityError:
            raise EmailAlreadyInUse(new_email or user.email)

        # updated_at lo rellena el servidor; lo recargamos para la respuesta
        await self.db.refresh(updated)
        logger.info("profile_updated user_id=%s fields=%s", updated.id, sorted(changes))
        return updated

    # ---------- Cambio de contraseña ----------

    async def change_password(self, user: User, current_password: str, new_password: str) -> None:
        if not user.password_hash:
            raise PasswordNotSet()

        if not self.password_hasher.verify(current_password, user.password_hash):
            raise InvalidCurrentPassword()

        async def _work() -> None:
            user.password_hash = self.password_hasher.hash(new_password)
            await self.db.flush()

        await commit_or_raise(self.db, _work)
        logger.info("password_changed user_id=%s", user.id)


__all__ = [
    "ProfileService",
    "PasswordHasher",
    "ProfileError",
    "EmailAlreadyInUse",
    "InvalidCurrentPassword",
    "PasswordNotSet",
]
# Fin del archivo backend/app/modules/user_profile/services/profile_service.py
