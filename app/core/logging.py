# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Fachada de logging para Tintero sobre `app.shared.config.logging_config`.

Autor: Equipo Tintero
Fecha: 2026-09-18
"""

from typing import Literal

from app.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """Configura el sistema de logging de la aplicación."""
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo backend/app/core/logging.py
