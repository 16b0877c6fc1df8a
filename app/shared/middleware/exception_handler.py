# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/exception_handler.py

Middleware ASGI para capturar excepciones no manejadas y responder JSON.

Garantiza que cualquier error 500 devuelva JSON estructurado en lugar de
text/plain, con error_code y request_id para correlación de logs.

Autor: Equipo Tintero
Fecha: 2026-09-17
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.shared.utils.json_response import UTF8JSONResponse

logger = logging.getLogger(__name__)

# Headers de request ID que respetamos si vienen del proxy
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware que captura excepciones no manejadas y devuelve JSON 500.

    Las HTTPException de FastAPI ya se resuelven dentro del router;
    aquí solo llega lo que nadie tradujo (bugs, BD caída, etc.).
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = getattr(request.state, "request_id", None) or get_request_id(request)

        # Inyectar request_id en state para uso downstream
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s",
                request_id,
                request.method,
                request.url.path,
            )
            return UTF8JSONResponse(
                status_code=500,
                content={
                    "detail": {
                        "error_code": "INTERNAL_SERVER_ERROR",
                        "message": "Error interno del servidor",
                        "request_id": request_id,
                    }
                },
                headers={"X-Request-ID": request_id},
            )

        response.headers.setdefault("X-Request-ID", request_id)
        return response


__all__ = ["JSONExceptionMiddleware", "get_request_id"]
# Fin del archivo backend/app/shared/middleware/exception_handler.py
