# -*- coding: utf-8 -*-
"""
backend/app/modules/user_profile/routes/__init__.py

Rutas del módulo de perfil de usuario (montadas bajo /api/profile).
"""

from .profile_routes import router as user_profile_router

__all__ = ["user_profile_router"]
