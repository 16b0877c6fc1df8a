# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Ensambla los routers del módulo Auth.
Se importa desde master_routes.py para montar bajo /api.

Autor: Equipo Tintero
Fecha: 2026-09-19
"""

from fastapi import APIRouter

from .auth_public import router as auth_public_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [auth_public_router]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
