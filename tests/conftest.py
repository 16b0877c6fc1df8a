# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para Tintero.

- PYTHON_ENV=test ANTES de importar la app: settings de prueba con
  SQLite en memoria (StaticPool, una única conexión compartida).
- Cada test recibe un esquema recién creado; al terminar se elimina y
  se libera el engine (la BD en memoria desaparece con su conexión).
- Cliente httpx con ASGITransport y ciclo de vida vía asgi-lifespan.
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-tintero-suite")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

from collections.abc import AsyncIterator

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

DEFAULT_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="session")
def app():
    """Carga la aplicación FastAPI después de fijar las variables de entorno."""
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def db_schema() -> AsyncIterator[None]:
    from app.core.db import Base, create_all, engine

    await create_all()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_schema):
    from app.core.db import SessionLocal

    async with SessionLocal() as session:
        yield session


@pytest.fixture
async def async_client(app, db_schema) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def make_user(async_client):
    """
    Factory: registra un usuario, hace login y devuelve los headers
    Authorization listos para usar.
    """
    async def _make(email: str = "ana@example.com", name: str = "Ana", password: str = DEFAULT_PASSWORD) -> dict:
        r = await async_client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert r.status_code == 201, r.text
        r = await async_client.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _make


@pytest.fixture
async def auth_headers(make_user) -> dict:
    return await make_user()


@pytest.fixture
async def other_headers(make_user) -> dict:
    return await make_user(email="bruno@example.com", name="Bruno")
