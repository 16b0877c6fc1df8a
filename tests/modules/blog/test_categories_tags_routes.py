# -*- coding: utf-8 -*-
"""
backend/tests/modules/blog/test_categories_tags_routes.py

Tests de integración de /api/categories y /api/tags.
"""

import re

import pytest

CATEGORIES = "/api/categories"
TAGS = "/api/tags"


# ---------------------------------------------------------------------------
# Categorías
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_and_list_categories(async_client, auth_headers):
    r = await async_client.post(
        CATEGORIES, json={"name": "Programación", "description": "Código"}, headers=auth_headers
    )
    assert r.status_code == 201
    assert r.json()["category"]["slug"] == "programacion"
    assert r.json()["category"]["post_count"] == 0

    r = await async_client.get(CATEGORIES)
    assert r.status_code == 200
    assert [c["name"] for c in r.json()["categories"]] == ["Programación"]


@pytest.mark.asyncio
async def test_category_write_requires_auth(async_client):
    assert (await async_client.post(CATEGORIES, json={"name": "X"})).status_code == 401
    assert (await async_client.put(f"{CATEGORIES}/1", json={"name": "X"})).status_code == 401
    assert (await async_client.delete(f"{CATEGORIES}/1")).status_code == 401


@pytest.mark.asyncio
async def test_duplicate_category_name_conflict(async_client, auth_headers):
    await async_client.post(CATEGORIES, json={"name": "Viajes"}, headers=auth_headers)

    r = await async_client.post(CATEGORIES, json={"name": "Viajes"}, headers=auth_headers)

    assert r.status_code == 409
    assert r.json()["detail"]["error_code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_category_names_with_same_slug_get_suffix(async_client, auth_headers):
    await async_client.post(CATEGORIES, json={"name": "Café"}, headers=auth_headers)

    r = await async_client.post(CATEGORIES, json={"name": "cafe"}, headers=auth_headers)

    assert r.status_code == 201
    assert r.json()["category"]["slug"] == "cafe-1"


@pytest.mark.asyncio
async def test_numeric_category_name_uses_fallback(async_client, auth_headers):
    r = await async_client.post(CATEGORIES, json={"name": "7"}, headers=auth_headers)

    assert re.fullmatch(r"category-\d+", r.json()["category"]["slug"])


@pytest.mark.asyncio
async def test_rename_category_refreshes_slug(async_client, auth_headers):
    created = (await async_client.post(CATEGORIES, json={"name": "Cine"}, headers=auth_headers)).json()["category"]

    r = await async_client.put(f"{CATEGORIES}/{created['id']}", json={"name": "Cine y series"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["category"]["slug"] == "cine-y-series"

    r = await async_client.put(f"{CATEGORIES}/{created['id']}", json={"name": "CINE Y SERIES"}, headers=auth_headers)
    assert r.json()["category"]["slug"] == "cine-y-series"
    assert r.json()["category"]["name"] == "CINE Y SERIES"


@pytest.mark.asyncio
async def test_update_category_description_only(async_client, auth_headers):
    created = (
        await async_client.post(CATEGORIES, json={"name": "Cine", "description": "Películas"}, headers=auth_headers)
    ).json()["category"]

    r = await async_client.put(f"{CATEGORIES}/{created['id']}", json={"description": None}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["category"]["description"] is None
    assert r.json()["category"]["slug"] == "cine"


@pytest.mark.asyncio
async def test_rename_category_to_existing_name_conflict(async_client, auth_headers):
    await async_client.post(CATEGORIES, json={"name": "Uno"}, headers=auth_headers)
    dos = (await async_client.post(CATEGORIES, json={"name": "Dos"}, headers=auth_headers)).json()["category"]

    r = await async_client.put(f"{CATEGORIES}/{dos['id']}", json={"name": "Uno"}, headers=auth_headers)

    assert r.status_code == 409


@pytest.mark.asyncio
async def test_unknown_category_404(async_client, auth_headers):
    assert (await async_client.put(f"{CATEGORIES}/999", json={"name": "X"}, headers=auth_headers)).status_code == 404
    assert (await async_client.delete(f"{CATEGORIES}/999", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_category_post_count_and_delete_in_use(async_client, auth_headers):
    category = (await async_client.post(CATEGORIES, json={"name": "Cine"}, headers=auth_headers)).json()["category"]
    r = await async_client.post(
        "/api/posts",
        json={"title": "Borrador", "content": "x", "category_id": category["id"]},
        headers=auth_headers,
    )
    assert r.status_code == 201

    listing = (await async_client.get(CATEGORIES)).json()["categories"]
    assert listing[0]["post_count"] == 1

    r = await async_client.delete(f"{CATEGORIES}/{category['id']}", headers=auth_headers)
    assert r.status_code == 409

    await async_client.delete("/api/posts/borrador", headers=auth_headers)
    r = await async_client.delete(f"{CATEGORIES}/{category['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert (await async_client.get(CATEGORIES)).json()["categories"] == []


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_and_rename_tag(async_client, auth_headers):
    r = await async_client.post(TAGS, json={"name": "Machine Learning"}, headers=auth_headers)
    assert r.status_code == 201
    tag = r.json()["tag"]
    assert tag["slug"] == "machine-learning"

    r = await async_client.put(f"{TAGS}/{tag['id']}", json={"name": "ML"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["tag"]["slug"] == "ml"


@pytest.mark.asyncio
async def test_duplicate_tag_name_conflict(async_client, auth_headers):
    await async_client.post(TAGS, json={"name": "Python"}, headers=auth_headers)

    r = await async_client.post(TAGS, json={"name": "Python"}, headers=auth_headers)

    assert r.status_code == 409


@pytest.mark.asyncio
async def test_tag_post_count_only_published(async_client, auth_headers):
    tag = (await async_client.post(TAGS, json={"name": "Python"}, headers=auth_headers)).json()["tag"]
    for title, published in (("Publicado", True), ("Borrador", False)):
        r = await async_client.post(
            "/api/posts",
            json={"title": title, "content": "x", "tag_ids": [tag["id"]], "published": published},
            headers=auth_headers,
        )
        assert r.status_code == 201

    tags = (await async_client.get(TAGS)).json()["tags"]

    assert tags[0]["post_count"] == 1


@pytest.mark.asyncio
async def test_delete_tag_detaches_posts(async_client, auth_headers):
    tag = (await async_client.post(TAGS, json={"name": "Python"}, headers=auth_headers)).json()["tag"]
    await async_client.post(
        "/api/posts",
        json={"title": "Hola", "content": "x", "tag_ids": [tag["id"]], "published": True},
        headers=auth_headers,
    )

    r = await async_client.delete(f"{TAGS}/{tag['id']}", headers=auth_headers)
    assert r.status_code == 200

    post = (await async_client.get("/api/posts/hola")).json()["post"]
    assert post["tags"] == []
    assert (await async_client.delete(f"{TAGS}/{tag['id']}", headers=auth_headers)).status_code == 404
