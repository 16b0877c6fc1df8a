# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/security.py

Utilidades de seguridad de Tintero.

Incluye:
- Hasheo y verificación de contraseñas (Argon2id via passlib)
- Generación y validación de tokens JWT de acceso (python-jose)

Autor: Equipo Tintero
Fecha: 2026-09-16
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import logging
import uuid

from passlib.context import CryptContext
from jose import JWTError, jwt, ExpiredSignatureError

from app.shared.config import settings

logger = logging.getLogger(__name__)

# ===== PASSWORD HASHING (Argon2id) =====
# Límite máximo para prevenir DoS con payloads gigantes
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""
    pass


def hash_password(password: str) -> str:
    """
    Genera un hash seguro de la contraseña usando Argon2id.

    Raises:
        PasswordTooLongError: Si la contraseña excede MAX_PASSWORD_LENGTH
    """
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres"
        )
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Verifica que la contraseña coincida con el hash almacenado.

    Returns:
        False si no hay hash (cuenta externa) o la contraseña es demasiado larga
    """
    if not hashed_password or len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# ===== JWT TOKENS =====
def _now_utc() -> datetime:
    """Timestamp UTC actual"""
    return datetime.now(timezone.utc)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Crea un JWT de acceso firmado.

    Args:
        data: Payload del token (ej: {"sub": user_id, "role": "USER"})
        expires_delta: Duración del token (None = ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Token JWT firmado como string
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    iat = _now_utc()
    to_encode.update({
        "exp": iat + expires_delta,
        "iat": iat,
        "jti": str(uuid.uuid4()),
        "token_type": "access",
    })

    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decodifica y valida un JWT de acceso.

    Returns:
        Payload del token si es válido, None si expiró, es inválido
        o no es de tipo "access"
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        logger.info("Token expirado: %s", e)
        return None
    except JWTError as e:
        logger.warning("Token inválido: %s", e)
        return None

    if payload.get("token_type") != "access":
        logger.warning("Tipo de token inesperado: %s", payload.get("token_type"))
        return None
    return payload


__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
]
# Fin del archivo backend/app/shared/utils/security.py
