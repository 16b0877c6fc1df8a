# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/__init__.py
"""

from .user_models import User

__all__ = ["User"]
