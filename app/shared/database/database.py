from __future__ import annotations
# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async sobre asyncpg (PostgreSQL) o aiosqlite (SQLite local/tests).

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencias FastAPI: get_async_session / get_db
- context manager: session_scope()
- check_database_health()
- create_all(): crea el esquema desde los modelos ORM (dev/local)

Notas:
- expire_on_commit=False: los objetos siguen legibles después del commit,
  las facades construyen la respuesta a partir de ellos.
- La URL se resuelve en settings.database_url (DB_URL > componentes > SQLite).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger("uvicorn.error")


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Crea un AsyncEngine para la URL dada.

    - SQLite en memoria: StaticPool para que todas las sesiones compartan
      la misma conexión (si no, cada conexión vería una BD vacía).
    - SQLite (cualquiera): activa PRAGMA foreign_keys para respetar FKs.
    - PostgreSQL: pool por defecto con pre_ping.
    """
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        eng = create_async_engine(url, echo=echo, **kwargs)

        @event.listens_for(eng.sync_engine, "connect")
        def _sqlite_fk_pragma(dbapi_conn, _record):  # pragma: no cover - trivial
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return eng

    return create_async_engine(url, echo=echo, pool_pre_ping=True)


DATABASE_URL: str = settings.database_url
DB_ECHO_SQL = bool(getattr(settings, "db_echo_sql", False))

# Log de conexión (sin credenciales)
logger.info(
    "[DB] Motor configurado → %s (echo=%s)",
    make_url(DATABASE_URL).render_as_string(hide_password=True),
    DB_ECHO_SQL,
)

# ── Engine
engine = build_engine(DATABASE_URL, echo=DB_ECHO_SQL)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencias FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# Alias usado por los routers
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_async_session():
        yield session


# ── Context manager reutilizable en scripts/tests
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # Dejo el commit/rollback a quien use el scope; esto es solo un helper
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Esquema
async def create_all(bind: AsyncEngine | None = None) -> None:
    """
    Crea todas las tablas registradas en Base.metadata.

    Importa los modelos de los módulos para registrarlos antes de crear.
    Pensado para desarrollo local y tests; en producción el esquema se
    administra fuera de la app (DB_CREATE_ALL=false).
    """
    import app.modules.auth.models  # noqa: F401  (registro de modelos)
    import app.modules.blog.models  # noqa: F401
    import app.modules.todos.models  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Esquema verificado (%d tablas)", len(Base.metadata.tables))


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "get_async_session",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
