# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Envuelve `app.shared.database.database` para que los módulos dependan
de `app.core.db` sin conocer la implementación interna.

Autor: Equipo Tintero
Fecha: 2026-09-18
"""

from app.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_db,
    session_scope,
    create_all,
    check_database_health,
)


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]

# Fin del archivo backend/app/core/db.py
