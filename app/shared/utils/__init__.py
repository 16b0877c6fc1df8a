# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from .base_models import UTF8SafeModel, PartialUpdateModel, EmailStr, Field
from .http_exceptions import (
    ApiException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
)
from .security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from .slug_utils import (
    slugify,
    needs_fallback,
    generate_unique_slug,
    SlugError,
    InvalidInputError,
    SlugGenerationExhaustedError,
)

__all__ = [
    # Base models
    "UTF8SafeModel",
    "PartialUpdateModel",
    "EmailStr",
    "Field",

    # HTTP Exceptions
    "ApiException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",

    # Security
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",

    # Slugs
    "slugify",
    "needs_fallback",
    "generate_unique_slug",
    "SlugError",
    "InvalidInputError",
    "SlugGenerationExhaustedError",
]
