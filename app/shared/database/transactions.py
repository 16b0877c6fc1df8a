# -*- coding: utf-8 -*-
"""
backend/app/shared/database/transactions.py

Helpers transaccionales compartidos por las facades de todos los módulos.

Autor: Equipo Tintero
Fecha: 2026-09-15
"""

import datetime as dt
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar('T')


def now_utc() -> dt.datetime:
    """
    Retorna timestamp actual UTC.

    Centralizado para facilitar testing con mocks.
    """
    return dt.datetime.now(dt.timezone.utc)


async def commit_or_raise(db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta `await work()` dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito.
    Aplica rollback y re-lanza si work() o el commit fallan.

    Args:
        db: Sesión SQLAlchemy async
        work: Corrutina (sin argumentos) a ejecutar dentro de la transacción

    Returns:
        Resultado de work()

    Raises:
        Cualquier excepción lanzada por work() o por el commit
        (p.ej. IntegrityError en un unique constraint)
    """
    try:
        result = await work()
        await db.commit()
        return result
    except Exception:
        await db.rollback()
        raise


__all__ = [
    "now_utc",
    "commit_or_raise",
]
# Fin del archivo backend/app/shared/database/transactions.py
