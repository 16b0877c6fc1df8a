# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/security.py

Esquema OAuth2 (Bearer) para extraer el token de Authorization.

auto_error=False: la ausencia de token la decide cada dependencia
(401 en get_current_user, None en get_optional_user).
"""

from fastapi.security import OAuth2PasswordBearer

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

__all__ = ["oauth2_scheme"]
