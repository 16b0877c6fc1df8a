# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para Tintero.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Equipo Tintero
Fecha: 2026-09-14
"""

from typing import Literal, Optional
from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

# Secreto por defecto: válido en dev/test, rechazado en producción
DEFAULT_JWT_SECRET = "please-change-me"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Tintero", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Base de datos
    # =========================
    # DB_URL tiene prioridad; sin ella y sin DB_HOST se usa SQLite local.
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: Optional[str] = Field(default=None, validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="tintero", validation_alias="DB_NAME")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_create_all: bool = Field(default=True, validation_alias="DB_CREATE_ALL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy async.
        Prioriza DB_URL si existe (normaliza el esquema de Postgres a asyncpg),
        luego componentes individuales; por último SQLite local vía aiosqlite.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            return (
                self.db_url.replace("postgres://", "postgresql+asyncpg://")
                .replace("postgresql://", "postgresql+asyncpg://")
            )

        if self.db_host:
            pw = quote_plus(self.db_password.get_secret_value())
            return (
                f"postgresql+asyncpg://{quote_plus(self.db_user)}:{pw}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )

        return f"sqlite+aiosqlite:///./{self.db_name}.sqlite3"

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Auth / JWT
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr(DEFAULT_JWT_SECRET), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # =========================
    # Slugs
    # =========================
    slug_max_attempts: int = Field(default=1000, ge=1, validation_alias="SLUG_MAX_ATTEMPTS")
    slug_write_retries: int = Field(default=3, ge=1, validation_alias="SLUG_WRITE_RETRIES")

    # =========================
    # Paginación
    # =========================
    page_size_default: int = Field(10, validation_alias="DEFAULT_PAGE_SIZE")
    page_size_max: int = Field(100, validation_alias="MAX_PAGE_SIZE")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")
    metrics_enabled: bool = Field(default=True, validation_alias="METRICS_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @computed_field  # type: ignore[misc]
    @property
    def jwt_secret(self) -> str:
        """Alias de compatibilidad: jwt_secret_key -> jwt_secret"""
        return self.jwt_secret_key.get_secret_value()

    def get_cors_origins(self) -> list[str]:
        """Convierte CORS_ORIGINS (coma-separado) en lista limpia."""
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    # ===== Validaciones de seguridad =====
    def _security_checks(self) -> None:
        """
        Validaciones que solo aplican en producción:
        - JWT_SECRET_KEY debe estar definido y no ser el valor por defecto.
        """
        if not self.is_prod:
            return
        if self.jwt_secret in ("", DEFAULT_JWT_SECRET):
            raise ValueError("JWT_SECRET_KEY debe configurarse en producción")


__all__ = ["BaseAppSettings", "EnvName", "DEFAULT_JWT_SECRET"]

# Fin del archivo backend/app/shared/config/settings_base.py
