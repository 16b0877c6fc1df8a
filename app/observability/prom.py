# -*- coding: utf-8 -*-
"""
backend/app/observability/prom.py

Configuración de observabilidad Prometheus para Tintero.

Incluye:
- Middleware HTTP para conteo y latencia por ruta/estado
- Endpoint /metrics compatible con Prometheus (pull model)
- Soporte multiproceso (Prometheus MultiProcess Collector)
- Métricas de generación de slugs (fallbacks, intentos, reintentos de escritura)

Autor: Equipo Tintero
Fecha: 2026-09-18
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
    Counter, Histogram,
)

# Contadores/Histogramas de capa HTTP (labels saneados: method/route/status)
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
)

# Slugs (label entity: post | category | tag)
SLUG_FALLBACK_TOTAL = Counter(
    "slug_fallback_total",
    "Slugs sintéticos <prefix>-<millis> generados",
    ["entity"],
)
SLUG_ORACLE_ATTEMPTS = Histogram(
    "slug_oracle_attempts",
    "Consultas al oráculo de disponibilidad por resolución de slug",
    ["entity"],
    buckets=(1, 2, 3, 5, 10, 25, 100, 1000),
)
SLUG_WRITE_RETRIES_TOTAL = Counter(
    "slug_write_retries_total",
    "Reintentos de escritura tras violar el UNIQUE de slug",
    ["entity"],
)


def _route_template(request: Request) -> str:
    """Path de la ruta (p.ej. /api/posts/{slug}) para no explotar cardinalidad."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware para instrumentar peticiones HTTP en FastAPI."""

    async def dispatch(self, request, call_next):
        method = request.method

        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        path = _route_template(request)
        status = str(resp.status_code)
        REQUEST_LATENCY.labels(method, path, status).observe(elapsed)
        REQUEST_COUNT.labels(method, path, status).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    """Inicializa CollectorRegistry con soporte multiproceso (si aplica)."""
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint /metrics en la app FastAPI."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    """Agrega middleware de Prometheus y monta el endpoint /metrics."""
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SLUG_FALLBACK_TOTAL",
    "SLUG_ORACLE_ATTEMPTS",
    "SLUG_WRITE_RETRIES_TOTAL",
    "PrometheusMiddleware",
    "mount_metrics",
    "setup_observability",
]

# Fin del archivo backend/app/observability/prom.py
