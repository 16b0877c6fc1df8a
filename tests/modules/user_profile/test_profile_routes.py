# -*- coding: utf-8 -*-
"""
backend/tests/modules/user_profile/test_profile_routes.py

Tests de /api/profile: lectura, actualización parcial y cambio de contraseña.
"""

import pytest

PROFILE = "/api/profile"


@pytest.mark.asyncio
async def test_get_profile(async_client, auth_headers):
    r = await async_client.get(PROFILE, headers=auth_headers)

    assert r.status_code == 200
    user = r.json()["user"]
    assert user["email"] == "ana@example.com"
    assert user["name"] == "Ana"
    assert user["bio"] is None


@pytest.mark.asyncio
async def test_partial_update_only_touches_sent_fields(async_client, auth_headers):
    r = await async_client.put(
        PROFILE,
        json={"bio": "Escribo sobre café", "image": "https://cdn.example.com/ana.png"},
        headers=auth_headers,
    )

    assert r.status_code == 200
    user = r.json()["user"]
    assert user["bio"] == "Escribo sobre café"
    assert user["image"] == "https://cdn.example.com/ana.png"
    assert user["name"] == "Ana"

    r = await async_client.put(PROFILE, json={"bio": None}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["user"]["bio"] is None
    assert r.json()["user"]["image"] == "https://cdn.example.com/ana.png"


@pytest.mark.asyncio
async def test_update_rejects_null_name_and_unknown_fields(async_client, auth_headers):
    assert (await async_client.put(PROFILE, json={"name": None}, headers=auth_headers)).status_code == 422
    assert (await async_client.put(PROFILE, json={"role": "ADMIN"}, headers=auth_headers)).status_code == 422


@pytest.mark.asyncio
async def test_update_email_in_use_conflict(async_client, auth_headers, other_headers):
    r = await async_client.put(PROFILE, json={"email": "Bruno@example.com"}, headers=auth_headers)

    assert r.status_code == 409


@pytest.mark.asyncio
async def test_update_email_lowercases(async_client, auth_headers):
    r = await async_client.put(PROFILE, json={"email": "Ana.Nueva@Example.com"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["user"]["email"] == "ana.nueva@example.com"


@pytest.mark.asyncio
async def test_change_password_flow(async_client, auth_headers):
    r = await async_client.put(
        f"{PROFILE}/password",
        json={"current_password": "s3cret-pass", "new_password": "n3w-secret-pass"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Contraseña actualizada"}

    old = await async_client.post("/api/auth/login", json={"email": "ana@example.com", "password": "s3cret-pass"})
    new = await async_client.post("/api/auth/login", json={"email": "ana@example.com", "password": "n3w-secret-pass"})
    assert old.status_code == 401
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_change_password_wrong_current(async_client, auth_headers):
    r = await async_client.put(
        f"{PROFILE}/password",
        json={"current_password": "incorrecta", "new_password": "n3w-secret-pass"},
        headers=auth_headers,
    )

    assert r.status_code == 401
