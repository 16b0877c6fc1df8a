# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_schemas.py

Schemas Pydantic de registro y login.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from __future__ import annotations

import re

from pydantic import ConfigDict, field_validator

from app.shared.utils.base_models import UTF8SafeModel, EmailStr, Field
from app.shared.utils.security import MAX_PASSWORD_LENGTH

_HAS_ALNUM = re.compile(r"[A-Za-z0-9]")


class RegisterRequest(UTF8SafeModel):
    email: EmailStr = Field(..., description="Correo del usuario")
    password: str = Field(..., min_length=8, max_length=MAX_PASSWORD_LENGTH, description="Contraseña (mínimo 8 caracteres)")
    name: str = Field(..., min_length=1, max_length=255, description="Nombre visible")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ana@example.com", "password": "s3cret-pass", "name": "Ana"}
        }
    )

    @field_validator("email")
    @classmethod
    def _lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def _password_alnum(cls, v: str) -> str:
        if not _HAS_ALNUM.search(v):
            raise ValueError("La contraseña debe contener al menos una letra o número")
        return v


class LoginRequest(UTF8SafeModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_LENGTH)


class TokenResponse(UTF8SafeModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Vigencia del token en segundos")


class UserSummary(UTF8SafeModel):
    id: int
    email: str
    name: str | None = None


class RegisterResponse(UTF8SafeModel):
    user: UserSummary


__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserSummary",
    "RegisterResponse",
]
# Fin del archivo backend/app/modules/auth/schemas/auth_schemas.py
