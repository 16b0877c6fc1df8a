# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/user_models.py

Modelo principal de usuarios (User).

- email único (se guarda en minúsculas)
- password_hash nullable: cuentas creadas por un proveedor externo
  no tienen contraseña local y no pueden hacer login por password.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.shared.database.transactions import now_utc
from app.modules.auth.enums import UserRole, user_role_enum


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    role: Mapped[UserRole] = mapped_column(
        user_role_enum(),
        nullable=False,
        default=UserRole.USER,
        server_default=UserRole.USER.value,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), onupdate=now_utc, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role}>"


__all__ = ["User"]
# Fin del archivo backend/app/modules/auth/models/user_models.py
