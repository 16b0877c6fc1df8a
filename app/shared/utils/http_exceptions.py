# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP personalizadas para la API de Tintero.
Estandariza respuestas de error con códigos HTTP apropiados y un cuerpo
estructurado:

    {"detail": {"error_code": "NOT_FOUND", "message": "Post no encontrado"}}

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class ApiException(HTTPException):
    """Base: HTTPException con detail estructurado {error_code, message}."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code_default: str = "INTERNAL_SERVER_ERROR"
    message_default: str = "Error interno del servidor"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code or self.error_code_default
        self.message = message or self.message_default
        super().__init__(
            status_code=self.status_code_default,
            detail={"error_code": self.error_code, "message": self.message},
            headers=headers,
        )


class BadRequestException(ApiException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    status_code_default = status.HTTP_400_BAD_REQUEST
    error_code_default = "VALIDATION_ERROR"
    message_default = "Solicitud inválida"


class UnauthorizedException(ApiException):
    """401 - Autenticación requerida o credenciales inválidas"""
    status_code_default = status.HTTP_401_UNAUTHORIZED
    error_code_default = "UNAUTHORIZED"
    message_default = "No autorizado - credenciales inválidas o ausentes"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(message, error_code, headers)


class ForbiddenException(ApiException):
    """403 - Usuario autenticado pero sin permisos"""
    status_code_default = status.HTTP_403_FORBIDDEN
    error_code_default = "FORBIDDEN"
    message_default = "Acceso prohibido - permisos insuficientes"


class NotFoundException(ApiException):
    """404 - Recurso no encontrado"""
    status_code_default = status.HTTP_404_NOT_FOUND
    error_code_default = "NOT_FOUND"
    message_default = "Recurso no encontrado"


class ConflictException(ApiException):
    """409 - Conflicto con el estado actual del recurso"""
    status_code_default = status.HTTP_409_CONFLICT
    error_code_default = "CONFLICT"
    message_default = "Conflicto - el recurso ya existe o hay un conflicto de estado"


class InternalServerException(ApiException):
    """500 - Error interno del servidor"""


__all__ = [
    "ApiException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
]
# Fin del archivo backend/app/shared/utils/http_exceptions.py
