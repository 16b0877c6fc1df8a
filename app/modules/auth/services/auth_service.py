# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/auth_service.py

Servicio de cuentas: registro y login por email/contraseña.

- Registro: email único (409 si ya existe), hash Argon2id.
- Login: mismo mensaje 401 para email desconocido y contraseña incorrecta.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import UserRole
from app.modules.auth.models.user_models import User
from app.modules.auth.repositories.user_repository import UserRepository, normalize_email
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from app.shared.config import settings
from app.shared.database.transactions import commit_or_raise
from app.shared.utils.http_exceptions import ConflictException, UnauthorizedException
from app.shared.utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Email o contraseña incorrectos"
EMAIL_TAKEN_MESSAGE = "Ya existe una cuenta con este email"


class AuthService:
    """Orquesta repositorio de usuarios + hashing + emisión de JWT."""

    def __init__(self, db: AsyncSession, users: UserRepository | None = None) -> None:
        self.db = db
        self.users = users or UserRepository(db)

    async def register(self, data: RegisterRequest) -> User:
        email = normalize_email(data.email)

        if await self.users.get_by_email(email):
            raise ConflictException(EMAIL_TAKEN_MESSAGE)

        async def _work() -> User:
            user = User(
                email=email,
                name=data.name,
                password_hash=hash_password(data.password),
                role=UserRole.USER,
            )
            return await self.users.add(user)

        try:
            user = await commit_or_raise(self.db, _work)
        except IntegrityError:
            # Registro concurrente con el mismo email
            raise ConflictException(EMAIL_TAKEN_MESSAGE)

        logger.info("user_registered user_id=%s", user.id)
        return user

    async def login(self, data: LoginRequest) -> TokenResponse:
        user = await self.users.get_by_email(data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            logger.info("login_failed email_domain=%s", data.email.rsplit("@", 1)[-1])
            raise UnauthorizedException(INVALID_CREDENTIALS_MESSAGE)

        token = create_access_token({"sub": str(user.id), "role": str(user.role)})
        logger.info("login_succeeded user_id=%s", user.id)
        return TokenResponse(
            access_token=token,
            expires_in=settings.access_token_expire_minutes * 60,
        )


__all__ = ["AuthService", "INVALID_CREDENTIALS_MESSAGE", "EMAIL_TAKEN_MESSAGE"]
# Fin del archivo backend/app/modules/auth/services/auth_service.py
