# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Tintero
Fecha: 2026-09-15
"""

from __future__ import annotations

from .database import (
    engine,
    SessionLocal,
    get_async_session,
    get_db,
    session_scope,
    create_all,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION, as_db_enum
from .repository import BaseRepository
from .transactions import commit_or_raise, now_utc

__all__ = [
    "engine",
    "SessionLocal",
    "Base",             # Base declarativa única
    "NAMING_CONVENTION",
    "as_db_enum",
    "BaseRepository",
    "commit_or_raise",
    "now_utc",
    "get_async_session",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
