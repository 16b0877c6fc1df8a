# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend Tintero.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging configurado desde settings (plain/pretty/json).
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Creación del esquema en el arranque cuando DB_CREATE_ALL=true (dev).
- Health principal /health delegado al paquete app.routes (health_routes.py)

Autor: Equipo Tintero
Fecha: 2026-09-26
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea settings
# En PROD no se sobreescriben variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"  # backend/.env
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
if _PYTHON_ENV != "production":
    load_dotenv(dotenv_path=_ENV_PATH, override=False)

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.core.logging import setup_logging
from app.core.settings import get_settings

settings = get_settings()
setup_logging(level=settings.log_level, fmt=settings.log_format)
logger = logging.getLogger(__name__)

from app.core.db import create_all, engine
from app.observability.prom import setup_observability
from app.shared.middleware import (
    JSONExceptionMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from app.shared.utils.json_response import UTF8JSONResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    if settings.db_create_all:
        await create_all()
    logger.info("Backend de Tintero iniciado (env=%s)", settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await engine.dispose()
        logger.info("Backend de Tintero apagado.")


openapi_tags = [
    {"name": "auth", "description": "Registro y login"},
    {"name": "profile", "description": "Perfil del usuario autenticado"},
    {"name": "posts", "description": "Posts del blog"},
    {"name": "categories", "description": "Categorías del blog"},
    {"name": "tags", "description": "Tags del blog"},
    {"name": "todos", "description": "Tareas personales"},
    {"name": "health", "description": "Estado del servicio"},
]

app = FastAPI(
    title=f"{settings.app_name} API",
    description="API del blog y las tareas de Tintero",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,
)


# ═══════════════════════════════════════════════════════════════════════════════
# MIDDLEWARES
# El orden real de ejecución en Starlette es inverso al registro:
# CORS se registra al final para ejecutarse primero (outermost).
# ═══════════════════════════════════════════════════════════════════════════════
app.add_middleware(JSONExceptionMiddleware)

if settings.metrics_enabled:
    setup_observability(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_prod)


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS a partir de CORS_ORIGINS.

    "*" con allow_credentials=True es inválido en navegadores: en modo
    wildcard se desactivan las credenciales.
    """
    origins_list = settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"] if not is_wildcard_only else ["*"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    if not origins_list:
        logger.warning("CORS sin orígenes configurados: se bloquearán requests cross-origin")

    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS origins=%s credentials=%s", origins_list, cors_config["allow_credentials"])
    return cors_config


_cors_config = _configure_cors(app)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS CON UTF-8
# ═══════════════════════════════════════════════════════════════════════════════
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """HTTPException con charset UTF-8 (mensajes con acentos)."""
    return UTF8JSONResponse(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/", include_in_schema=False)
async def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.is_dev)

# Fin del archivo backend/app/main.py
