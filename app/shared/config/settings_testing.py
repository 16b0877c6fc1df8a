# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, base de datos en memoria
y sin creación automática de tablas (los fixtures controlan el esquema).

Autor: Equipo Tintero
Fecha: 2026-09-14
"""

from typing import Optional

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Base de datos: SQLite en memoria salvo override por env ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"
    db_create_all: bool = False

    # --- Métricas: el registry global de Prometheus es compartido entre tests ---
    metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]

# Fin del archivo backend/app/shared/config/settings_testing.py
