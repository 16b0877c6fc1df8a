# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Uso (default response class):

    from app.shared.utils.json_response import UTF8JSONResponse

    app = FastAPI(default_response_class=UTF8JSONResponse)

Títulos como "Café" o "記事タイトル" viajan intactos aunque el cliente
no asuma UTF-8 por defecto.

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


__all__ = ["UTF8JSONResponse"]
