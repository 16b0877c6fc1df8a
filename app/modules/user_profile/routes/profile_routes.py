# -*- coding: utf-8 -*-
"""
backend/app/modules/user_profile/routes/profile_routes.py

Endpoints autenticados del perfil de usuario:
- GET  /profile           → datos del usuario actual
- PUT  /profile           → actualización parcial
- PUT  /profile/password  → cambio de contraseña

Autor: Equipo Tintero
Fecha: 2026-09-20
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.dependencies import get_current_user
from app.modules.auth.models.user_models import User
from app.modules.user_profile.schemas import (
    ChangePasswordRequest,
    MessageResponse,
    UserProfile,
    UserProfileResponse,
    UserProfileUpdateRequest,
)
from app.modules.user_profile.services import (
    EmailAlreadyInUse,
    InvalidCurrentPassword,
    PasswordNotSet,
    ProfileService,
)
from app.shared.utils.http_exceptions import (
    BadRequestException,
    ConflictException,
    UnauthorizedException,
)
from app.shared.utils.security import hash_password, verify_password

router = APIRouter(prefix="/profile", tags=["profile"])


# ---------------------------------------------------------------------------
# DI
# ---------------------------------------------------------------------------

class PasswordHasherAdapter:
    """Implementa el protocolo PasswordHasher con las utilidades de seguridad."""

    def verify(self, plain_password: str, password_hash: Optional[str]) -> bool:
        return verify_password(plain_password, password_hash)

    def hash(self, plain_password: str) -> str:
        return hash_password(plain_password)


_password_hasher = PasswordHasherAdapter()


async def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    return ProfileService(db=db, password_hasher=_password_hasher)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=UserProfileResponse, summary="Perfil del usuario actual")
async def get_profile(user: User = Depends(get_current_user)) -> UserProfileResponse:
    return UserProfileResponse(user=UserProfile.model_validate(user))


@router.put("", response_model=UserProfileResponse, summary="Actualizar perfil")
async def update_profile(
    payload: UserProfileUpdateRequest,
    user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> UserProfileResponse:
    try:
        updated = await service.update_profile(user, payload.changes())
    except EmailAlreadyInUse as e:
        raise ConflictException(str(e))
    return UserProfileResponse(user=UserProfile.model_validate(updated))


@router.put("/password", response_model=MessageResponse, summary="Cambiar contraseña")
async def change_password(
    payload: ChangePasswordRequest,
    user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    try:
        await service.change_password(user, payload.current_password, payload.new_password)
    except InvalidCurrentPassword as e:
        raise UnauthorizedException(str(e))
    except PasswordNotSet as e:
        raise BadRequestException(str(e))
    return MessageResponse(message="Contraseña actualizada")

# Fin del archivo backend/app/modules/user_profile/routes/profile_routes.py
