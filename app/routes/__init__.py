# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Tintero.

Responsabilidades:
- Incluir el router de health en /health y /api/health.
- Incluir la capa /api definida en master_routes.py.

Autor: Equipo Tintero
Fecha: 2026-09-26
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from .master_routes import api

router = APIRouter()

# Health check sin prefijo y bajo /api
router.include_router(health_router)
router.include_router(health_router, prefix="/api")

router.include_router(api)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
