# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- validate_jwt_token: valida el token y extrae el user_id (claim 'sub')
- get_current_user: usuario autenticado (401 si falta o es inválido)
- get_optional_user: usuario o None para endpoints públicos
- require_admin: exige rol ADMIN (403)

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.enums import UserRole
from app.modules.auth.models.user_models import User
from app.modules.auth.repositories.user_repository import UserRepository
from app.shared.utils.http_exceptions import ForbiddenException, UnauthorizedException
from app.shared.utils.security import decode_token

from .security import oauth2_scheme

logger = logging.getLogger(__name__)


def validate_jwt_token(token: str) -> int:
    """
    Valida un JWT y extrae el user_id.

    Raises:
        UnauthorizedException: token inválido, expirado o sin 'sub' numérico.
    """
    payload = decode_token(token)
    if not payload:
        raise UnauthorizedException("Token inválido o expirado")

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise UnauthorizedException("El token no contiene un identificador de usuario")


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Dependencia de autenticación para endpoints protegidos."""
    if not token:
        raise UnauthorizedException("Autenticación requerida")

    user_id = validate_jwt_token(token)
    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        # Token válido de un usuario ya eliminado
        raise UnauthorizedException("Usuario no encontrado")
    return user


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """
    Igual que get_current_user pero devuelve None para anónimos.
    Un token inválido se trata como anónimo.
    """
    if not token:
        return None
    payload = decode_token(token)
    if not payload:
        return None
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
    return await UserRepository(db).get_by_id(user_id)


async def get_current_user_id(user: User = Depends(get_current_user)) -> int:
    return user.id


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Dependencia que requiere rol ADMIN.

    Raises:
        UnauthorizedException: token inválido
        ForbiddenException: usuario no es admin
    """
    if user.role != UserRole.ADMIN:
        raise ForbiddenException("Se requiere rol de administrador")
    return user


__all__ = [
    "validate_jwt_token",
    "get_current_user",
    "get_optional_user",
    "get_current_user_id",
    "require_admin",
]
