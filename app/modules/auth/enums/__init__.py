# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/__init__.py

Export central de enums de autenticación.
"""

from .role_enum import UserRole, user_role_enum

__all__ = ["UserRole", "user_role_enum"]
