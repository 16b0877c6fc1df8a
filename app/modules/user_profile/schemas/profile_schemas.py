# -*- coding: utf-8 -*-
"""
backend/app/modules/user_profile/schemas/profile_schemas.py

Schemas Pydantic del perfil de usuario.

Autor: Equipo Tintero
Fecha: 2026-09-20
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from pydantic import AnyHttpUrl, field_validator

from app.shared.utils.base_models import UTF8SafeModel, PartialUpdateModel, EmailStr, Field
from app.shared.utils.security import MAX_PASSWORD_LENGTH

_HAS_ALNUM = re.compile(r"[A-Za-z0-9]")


class UserProfile(UTF8SafeModel):
    id: int
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserProfileResponse(UTF8SafeModel):
    user: UserProfile


class UserProfileUpdateRequest(PartialUpdateModel):
    """
    Actualización parcial. `image` y `bio` aceptan null para limpiarlos;
    `name` y `email` no.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = Field(default=None, max_length=255)
    image: Optional[AnyHttpUrl] = Field(default=None, description="URL de imagen (≤500)")
    bio: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("image")
    @classmethod
    def _image_length(cls, v: Optional[AnyHttpUrl]) -> Optional[AnyHttpUrl]:
        if v is not None and len(str(v)) > 500:
            raise ValueError("La URL de imagen no puede exceder 500 caracteres")
        return v

    @field_validator("name", "email")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("No puede ser null")
        return v

    def changes(self) -> dict:
        data = super().changes()
        if data.get("image") is not None:
            data["image"] = str(data["image"])
        if data.get("email") is not None:
            data["email"] = data["email"].lower()
        return data


class ChangePasswordRequest(UTF8SafeModel):
    current_password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_LENGTH)
    new_password: str = Field(..., min_length=8, max_length=MAX_PASSWORD_LENGTH)

    @field_validator("new_password")
    @classmethod
    def _password_alnum(cls, v: str) -> str:
        if not _HAS_ALNUM.search(v):
            raise ValueError("La contraseña debe contener al menos una letra o número")
        return v


class MessageResponse(UTF8SafeModel):
    message: str


__all__ = [
    "UserProfile",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
    "ChangePasswordRequest",
    "MessageResponse",
]
# Fin del archivo backend/app/modules/user_profile/schemas/profile_schemas.py
