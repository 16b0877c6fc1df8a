# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/role_enum.py

Enum de roles de usuario.

Roles disponibles: USER, ADMIN

Autor: Equipo Tintero
Fecha: 2026-09-19
"""
from enum import StrEnum

from app.shared.database.base import as_db_enum


class UserRole(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


def user_role_enum():
    """Tipo SQLAlchemy para la columna users.role."""
    return as_db_enum(UserRole, name="user_role_enum")


__all__ = ["UserRole", "user_role_enum"]

# Fin del archivo backend/app/modules/auth/enums/role_enum.py
