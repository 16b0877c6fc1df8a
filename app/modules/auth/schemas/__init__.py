# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py
"""

from .auth_schemas import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserSummary,
    RegisterResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserSummary",
    "RegisterResponse",
]
