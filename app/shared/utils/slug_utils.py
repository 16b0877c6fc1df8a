# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/slug_utils.py

Generación de slugs únicos para recursos direccionables por URL
(posts, categorías, tags).

Flujo:
1. slugify(): normaliza texto libre a un slug ASCII en minúsculas.
2. needs_fallback(): decide si el slug normalizado no sirve (vacío,
   título japonés/chino, número corto) y debe usarse un slug sintético.
3. generate_unique_slug(): prueba `base`, `base-1`, `base-2`, ... contra
   un oráculo asíncrono de disponibilidad hasta encontrar uno libre.

El oráculo lo provee quien llama (normalmente construido sobre el
repositorio del modelo); este módulo no conoce la base de datos. La
unicidad definitiva la garantiza el UNIQUE constraint de la tabla.

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from __future__ import annotations

import logging
import re
import time
import unicodedata
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

# Oráculo de disponibilidad: True si el candidato está libre
SlugOracle = Callable[[str], Awaitable[bool]]

MAX_SLUG_ATTEMPTS = 1000

_STRIP_RE = re.compile(r"[^\w\s-]", re.ASCII)
_COLLAPSE_RE = re.compile(r"[\s_-]+")
_EDGE_HYPHENS_RE = re.compile(r"^-+|-+$")
# Hiragana, Katakana, CJK Unified Ideographs
_CJK_RE = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")
_SHORT_NUMERIC_RE = re.compile(r"^\d{1,3}$")


# =========================
# Errores
# =========================
class SlugError(Exception):
    """Base de errores de generación de slugs."""


class InvalidInputError(SlugError, ValueError):
    """El texto base está vacío o no es str."""


class SlugGenerationExhaustedError(SlugError):
    """Ningún candidato resultó disponible tras el máximo de intentos."""

    def __init__(self, base_slug: str, attempts: int):
        self.base_slug = base_slug
        self.attempts = attempts
        super().__init__(
            f"No se pudo generar un slug único para '{base_slug}' tras {attempts} intentos"
        )


# =========================
# Normalización
# =========================
def slugify(value: Any) -> str:
    """
    Convierte texto libre en slug URL-safe.

        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café con leche")
        'cafe-con-leche'

    Nunca lanza: entradas vacías o no-str devuelven "".
    """
    if not isinstance(value, str) or not value:
        return ""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = _STRIP_RE.sub("", value.lower().strip())
    value = _COLLAPSE_RE.sub("-", value)
    return _EDGE_HYPHENS_RE.sub("", value)


# Alias con el nombre del contrato público
normalize = slugify


def needs_fallback(slug: str, original_text: str) -> bool:
    """
    True si `slug` no es utilizable y debe reemplazarse por uno sintético.
    """
    if not slug:
        return True
    if original_text and _CJK_RE.search(original_text):
        return True
    return bool(_SHORT_NUMERIC_RE.match(slug))


def fallback_slug(prefix: str) -> str:
    """`<prefix>-<epoch en milisegundos>`"""
    return f"{prefix}-{time.time_ns() // 1_000_000}"


# =========================
# Resolución de unicidad
# =========================
async def generate_unique_slug(
    base_text: str,
    is_available: SlugOracle,
    fallback_prefix: str,
    *,
    max_attempts: int = MAX_SLUG_ATTEMPTS,
) -> str:
    """
    Devuelve un slug que `is_available` confirmó como libre.

    Args:
        base_text: Título o nombre original (no vacío)
        is_available: Oráculo async; se consulta una vez por candidato
        fallback_prefix: Prefijo para slugs sintéticos ("post", "category", "tag")
        max_attempts: Total de consultas al oráculo antes de rendirse

    Raises:
        InvalidInputError: base_text vacío o no-str (el oráculo no se consulta)
        SlugGenerationExhaustedError: tras `max_attempts` candidatos ocupados

    Los errores del oráculo se propagan sin traducir.
    """
    if not isinstance(base_text, str) or not base_text:
        raise InvalidInputError("El texto base del slug es obligatorio")

    base_slug = slugify(base_text)
    if needs_fallback(base_slug, base_text):
        fallback = fallback_slug(fallback_prefix)
        logger.warning(
            "slug_fallback prefix=%s normalized=%r fallback=%s",
            fallback_prefix, base_slug, fallback,
        )
        base_slug = fallback

    for attempt in range(max_attempts):
        candidate = base_slug if attempt == 0 else f"{base_slug}-{attempt}"
        if await is_available(candidate):
            return candidate
        logger.debug("slug_collision candidate=%s attempt=%d", candidate, attempt + 1)

    raise SlugGenerationExhaustedError(base_slug, max_attempts)


__all__ = [
    "SlugOracle",
    "MAX_SLUG_ATTEMPTS",
    "SlugError",
    "InvalidInputError",
    "SlugGenerationExhaustedError",
    "slugify",
    "normalize",
    "needs_fallback",
    "fallback_slug",
    "generate_unique_slug",
]

# Fin del archivo backend/app/shared/utils/slug_utils.py
