# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/auth_public.py

Rutas públicas de autenticación:
- Registro de usuario
- Login (emisión de JWT)

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.modules.auth.schemas import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserSummary,
)
from app.modules.auth.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Registro de usuario",
)
async def register(
    payload: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Crea una cuenta con email y contraseña.

    - 409 si el email ya está registrado.
    """
    user = await service.register(payload)
    return RegisterResponse(user=UserSummary.model_validate(user))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login con email y contraseña",
)
async def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    return await service.login(payload)

# Fin del archivo backend/app/modules/auth/routes/auth_public.py
