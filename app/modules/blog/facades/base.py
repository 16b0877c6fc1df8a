# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/base.py

Utilidades compartidas por las facades del blog: resolución de slug
sobre un repositorio y escritura con reintento ante colisión de slug.

Secuencia de una escritura con slug:

    intento 1: resolver slug → escribir → commit
               └─ IntegrityError en uq_<tabla>_slug (otro request lo tomó)
                  → rollback, métrica, reintento
    intento 2: resolver de nuevo (el oráculo ya ve la fila ajena) → ...
    agotados:  SlugConflict

El trabajo de cada intento debe recargar sus entidades: el rollback
expira todo lo que la sesión tenía cargado.

Autor: Equipo Tintero
Fecha: 2026-09-23
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.observability.prom import (
    SLUG_FALLBACK_TOTAL,
    SLUG_ORACLE_ATTEMPTS,
    SLUG_WRITE_RETRIES_TOTAL,
)
from app.shared.config import settings
from app.shared.database.repository import BaseRepository
from app.shared.database.transactions import commit_or_raise
from app.shared.utils.slug_utils import generate_unique_slug, needs_fallback, slugify

from .errors import SlugConflict

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_unique_violation(exc: IntegrityError, table: str, column: str) -> bool:
    """
    True si el IntegrityError viene del UNIQUE de `table.column`.

    PostgreSQL reporta el nombre del constraint (uq_posts_slug);
    SQLite reporta la columna (UNIQUE constraint failed: posts.slug).
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    return f"uq_{table}_{column}" in message or f"{table}.{column}" in message


def slug_needs_refresh(current_slug: str, old_text: str, new_text: Optional[str]) -> bool:
    """
    Un rename solo recalcula el slug si el texto cambió y su forma
    normalizada difiere del slug guardado.
    """
    if new_text is None or new_text == old_text:
        return False
    return slugify(new_text) != current_slug


async def resolve_slug(
    db: AsyncSession,
    repo: BaseRepository,
    text: str,
    *,
    entity: str,
    exclude_id: Any = None,
) -> str:
    """
    Resuelve un slug libre para `text` usando el repositorio como oráculo.

    En updates, `exclude_id` hace que la propia fila no cuente como ocupante.
    """
    attempts = 0

    async def _is_available(candidate: str) -> bool:
        nonlocal attempts
        attempts += 1
        return not await repo.slug_taken(db, candidate, exclude_id=exclude_id)

    if needs_fallback(slugify(text), text):
        SLUG_FALLBACK_TOTAL.labels(entity).inc()

    try:
        return await generate_unique_slug(
            text,
            _is_available,
            entity,
            max_attempts=settings.slug_max_attempts,
        )
    finally:
        SLUG_ORACLE_ATTEMPTS.labels(entity).observe(attempts)


async def write_with_slug_retry(
    db: AsyncSession,
    work: Callable[[], Awaitable[T]],
    *,
    entity: str,
    table: str,
    max_writes: Optional[int] = None,
) -> T:
    """
    Ejecuta `work` (resolver + escribir) con commit_or_raise, repitiendo
    todo el intento si el commit viola el UNIQUE del slug.

    Otros IntegrityError (nombre duplicado, FK) se propagan tal cual.

    Raises:
        SlugConflict: tras `max_writes` colisiones consecutivas
    """
    max_writes = max_writes or settings.slug_write_retries

    for attempt in range(1, max_writes + 1):
        try:
            return await commit_or_raise(db, work)
        except IntegrityError as e:
            if not is_unique_violation(e, table, "slug"):
                raise
            SLUG_WRITE_RETRIES_TOTAL.labels(entity).inc()
            logger.warning(
                "slug_write_conflict entity=%s attempt=%d/%d",
                entity, attempt, max_writes,
            )

    raise SlugConflict(entity, max_writes)


__all__ = [
    "is_unique_violation",
    "slug_needs_refresh",
    "resolve_slug",
    "write_with_slug_retry",
]

# Fin del archivo backend/app/modules/blog/facades/base.py
