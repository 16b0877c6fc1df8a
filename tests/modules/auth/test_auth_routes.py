# -*- coding: utf-8 -*-
"""
backend/tests/modules/auth/test_auth_routes.py

Tests de integración de /api/auth (registro y login) y de las
dependencias de autenticación sobre rutas protegidas.
"""

from datetime import timedelta

import pytest

from app.shared.utils.security import create_access_token, decode_token

REGISTER = "/api/auth/register"
LOGIN = "/api/auth/login"


@pytest.mark.asyncio
async def test_register_creates_user(async_client):
    r = await async_client.post(
        REGISTER,
        json={"email": "Ana@Example.com", "password": "s3cret-pass", "name": "Ana"},
    )

    assert r.status_code == 201
    user = r.json()["user"]
    assert user["email"] == "ana@example.com"
    assert user["name"] == "Ana"
    assert "password_hash" not in user


@pytest.mark.asyncio
async def test_register_duplicate_email_conflict(async_client):
    body = {"email": "ana@example.com", "password": "s3cret-pass", "name": "Ana"}
    assert (await async_client.post(REGISTER, json=body)).status_code == 201

    body["email"] = "ANA@example.com"
    r = await async_client.post(REGISTER, json=body)

    assert r.status_code == 409
    assert r.json()["detail"]["error_code"] == "CONFLICT"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"email": "no-es-email", "password": "s3cret-pass", "name": "Ana"},
        {"email": "ana@example.com", "password": "corta", "name": "Ana"},
        {"email": "ana@example.com", "password": "!!!!!!!!!!", "name": "Ana"},
        {"email": "ana@example.com", "password": "s3cret-pass", "name": ""},
    ],
)
async def test_register_validation_errors(async_client, body):
    r = await async_client.post(REGISTER, json=body)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_login_returns_bearer_token(async_client, make_user):
    await make_user(email="ana@example.com")

    r = await async_client.post(LOGIN, json={"email": "ana@example.com", "password": "s3cret-pass"})

    assert r.status_code == 200
    data = r.json()
    assert data["token_type"] == "bearer"
    assert data["expires_in"] > 0
    payload = decode_token(data["access_token"])
    assert payload is not None
    assert payload["sub"].isdigit()
    assert payload["role"] == "USER"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [("ana@example.com", "otra-clave-1"), ("nadie@example.com", "s3cret-pass")],
)
async def test_login_invalid_credentials_same_error(async_client, make_user, email, password):
    await make_user(email="ana@example.com")

    r = await async_client.post(LOGIN, json={"email": email, "password": password})

    assert r.status_code == 401
    assert r.json()["detail"]["message"] == "Email o contraseña incorrectos"
    assert r.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_protected_route_requires_token(async_client):
    r = await async_client.get("/api/profile")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_protected_route_rejects_invalid_token(async_client):
    r = await async_client.get("/api/profile", headers={"Authorization": "Bearer no-es-un-jwt"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_protected_route_rejects_expired_token(async_client, make_user):
    await make_user()
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-5))

    r = await async_client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_token_for_deleted_user_is_rejected(async_client):
    token = create_access_token({"sub": "9999"})

    r = await async_client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 401


# ---------------------------------------------------------------------------
# Dependencias
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_require_admin_rejects_regular_user():
    from app.modules.auth.dependencies import require_admin
    from app.modules.auth.enums import UserRole
    from app.modules.auth.models.user_models import User
    from app.shared.utils.http_exceptions import ForbiddenException

    user = User(id=1, email="ana@example.com", role=UserRole.USER)
    with pytest.raises(ForbiddenException):
        await require_admin(user)

    admin = User(id=2, email="root@example.com", role=UserRole.ADMIN)
    assert await require_admin(admin) is admin
