# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/routes/deps.py

Dependencias inyectables de las rutas del blog y traducción de errores
de dominio a excepciones HTTP.

Autor: Equipo Tintero
Fecha: 2026-09-24
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Query

from app.modules.blog.facades.errors import (
    BlogError,
    CategoryInUse,
    CategoryNotFound,
    InvalidReference,
    NameAlreadyExists,
    PermissionDenied,
    PostNotFound,
    SlugConflict,
    TagNotFound,
)
from app.shared.config import settings
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    ConflictException,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
)
from app.shared.utils.slug_utils import InvalidInputError, SlugError, SlugGenerationExhaustedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int


def get_page_params(
    page: int = Query(1, ge=1, description="Página (1-based)"),
    limit: Optional[int] = Query(None, ge=1, le=settings.page_size_max, description="Elementos por página"),
) -> PageParams:
    return PageParams(page=page, limit=limit or settings.page_size_default)


def to_http(exc: Exception) -> ApiException:
    """Traduce errores del blog y del generador de slugs a ApiException."""
    if isinstance(exc, (PostNotFound, CategoryNotFound, TagNotFound)):
        return NotFoundException(str(exc))
    if isinstance(exc, PermissionDenied):
        return ForbiddenException("Solo el autor puede modificar este post")
    if isinstance(exc, (NameAlreadyExists, CategoryInUse)):
        return ConflictException(str(exc))
    if isinstance(exc, SlugConflict):
        return ConflictException(str(exc), error_code="SLUG_CONFLICT")
    if isinstance(exc, InvalidReference):
        return BadRequestException(str(exc))
    if isinstance(exc, InvalidInputError):
        return BadRequestException(str(exc))
    if isinstance(exc, SlugGenerationExhaustedError):
        logger.error("slug_generation_exhausted base=%s attempts=%d", exc.base_slug, exc.attempts)
        return InternalServerException(
            "No se pudo generar un identificador para el recurso",
            error_code="SLUG_GENERATION_FAILED",
        )
    raise TypeError(f"Error no traducible: {exc!r}")


# Tupla para los except de las rutas
HANDLED_ERRORS = (BlogError, SlugError)

__all__ = ["PageParams", "get_page_params", "to_http", "HANDLED_ERRORS"]
