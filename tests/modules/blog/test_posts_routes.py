# -*- coding: utf-8 -*-
"""
backend/tests/modules/blog/test_posts_routes.py

Tests de integración de /api/posts:
- slugs derivados del título (sufijos, fallback, renombrado)
- visibilidad de borradores
- listado público con paginación y filtros
- permisos del autor
"""

import re

import pytest

from app.modules.blog.repositories import post_repository

POSTS = "/api/posts"


async def _create_post(client, headers, **overrides):
    body = {"title": "Hola mundo", "content": "Contenido", "published": True}
    body.update(overrides)
    r = await client.post(POSTS, json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["post"]


async def _create_category(client, headers, name="Tecnología"):
    r = await client.post("/api/categories", json={"name": name}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["category"]


async def _create_tag(client, headers, name="Python"):
    r = await client.post("/api/tags", json={"name": name}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["tag"]


# ---------------------------------------------------------------------------
# Creación y slugs
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_post_derives_slug(async_client, auth_headers):
    post = await _create_post(async_client, auth_headers, title="Café con leche")

    assert post["slug"] == "cafe-con-leche"
    assert post["author"]["name"] == "Ana"
    assert post["published"] is True
    assert post["published_at"] is not None
    assert post["tags"] == []


@pytest.mark.asyncio
async def test_duplicate_titles_get_suffixes(async_client, auth_headers):
    slugs = [(await _create_post(async_client, auth_headers))["slug"] for _ in range(3)]

    assert slugs == ["hola-mundo", "hola-mundo-1", "hola-mundo-2"]


@pytest.mark.asyncio
async def test_japanese_title_uses_fallback(async_client, auth_headers):
    post = await _create_post(async_client, auth_headers, title="記事タイトル")

    assert re.fullmatch(r"post-\d+", post["slug"])
    assert post["title"] == "記事タイトル"


@pytest.mark.asyncio
async def test_short_numeric_title_uses_fallback(async_client, auth_headers):
    post = await _create_post(async_client, auth_headers, title="42")

    assert re.fullmatch(r"post-\d+", post["slug"])


@pytest.mark.asyncio
async def test_create_requires_auth(async_client):
    r = await async_client.post(POSTS, json={"title": "Hola", "content": "x"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_create_rejects_blank_title(async_client, auth_headers):
    r = await async_client.post(POSTS, json={"title": "", "content": "x"}, headers=auth_headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_create_with_unknown_category_or_tags(async_client, auth_headers):
    r = await async_client.post(
        POSTS, json={"title": "Hola", "content": "x", "category_id": 999}, headers=auth_headers
    )
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "VALIDATION_ERROR"

    r = await async_client.post(
        POSTS, json={"title": "Hola", "content": "x", "tag_ids": [123]}, headers=auth_headers
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_create_with_category_and_tags(async_client, auth_headers):
    category = await _create_category(async_client, auth_headers)
    zeta = await _create_tag(async_client, auth_headers, "Zeta")
    alfa = await _create_tag(async_client, auth_headers, "Alfa")

    post = await _create_post(
        async_client, auth_headers, category_id=category["id"], tag_ids=[zeta["id"], alfa["id"]]
    )

    assert post["category"]["slug"] == "tecnologia"
    assert [t["name"] for t in post["tags"]] == ["Alfa", "Zeta"]


# ---------------------------------------------------------------------------
# Colisión concurrente de slug (reintento de escritura)
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_write_retry_after_concurrent_slug_collision(async_client, auth_headers, monkeypatch):
    await _create_post(async_client, auth_headers)
    real_slug_taken = post_repository.slug_taken
    calls = {"n": 0}

    async def stale_once(session, slug, *, exclude_id=None):
        # Primera consulta "no ve" el post existente, como si otro request
        # lo hubiera insertado después de verificar
        calls["n"] += 1
        if calls["n"] == 1:
            return False
        return await real_slug_taken(session, slug, exclude_id=exclude_id)

    monkeypatch.setattr(post_repository, "slug_taken", stale_once)

    post = await _create_post(async_client, auth_headers)

    assert post["slug"] == "hola-mundo-1"


@pytest.mark.asyncio
async def test_persistent_slug_collision_returns_409(async_client, auth_headers, monkeypatch):
    await _create_post(async_client, auth_headers)

    async def always_free(session, slug, *, exclude_id=None):
        return False

    monkeypatch.setattr(post_repository, "slug_taken", always_free)

    r = await async_client.post(POSTS, json={"title": "Hola mundo", "content": "x"}, headers=auth_headers)

    assert r.status_code == 409
    assert r.json()["detail"]["error_code"] == "SLUG_CONFLICT"


# ---------------------------------------------------------------------------
# Lectura y visibilidad
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_published_post_anonymously(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.get(f"{POSTS}/hola-mundo")

    assert r.status_code == 200
    assert r.json()["post"]["content"] == "Contenido"


@pytest.mark.asyncio
async def test_draft_only_visible_to_author(async_client, auth_headers, other_headers):
    await _create_post(async_client, auth_headers, title="Borrador", published=False)

    assert (await async_client.get(f"{POSTS}/borrador")).status_code == 404
    assert (await async_client.get(f"{POSTS}/borrador", headers=other_headers)).status_code == 404
    r = await async_client.get(f"{POSTS}/borrador", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["post"]["published_at"] is None


@pytest.mark.asyncio
async def test_unknown_slug_404(async_client):
    r = await async_client.get(f"{POSTS}/no-existe")

    assert r.status_code == 404
    assert r.json()["detail"]["error_code"] == "NOT_FOUND"


# ---------------------------------------------------------------------------
# Listado
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_only_published_newest_first(async_client, auth_headers):
    await _create_post(async_client, auth_headers, title="Primero")
    await _create_post(async_client, auth_headers, title="Oculto", published=False)
    await _create_post(async_client, auth_headers, title="Segundo")

    r = await async_client.get(POSTS)

    assert r.status_code == 200
    data = r.json()
    assert [p["slug"] for p in data["posts"]] == ["segundo", "primero"]
    assert data["pagination"] == {"page": 1, "limit": 10, "total": 2, "total_pages": 1}
    assert "content" not in data["posts"][0]


@pytest.mark.asyncio
async def test_list_pagination(async_client, auth_headers):
    for i in range(3):
        await _create_post(async_client, auth_headers, title=f"Post número {i + 10}")

    page1 = (await async_client.get(POSTS, params={"page": 1, "limit": 2})).json()
    page2 = (await async_client.get(POSTS, params={"page": 2, "limit": 2})).json()

    assert len(page1["posts"]) == 2
    assert len(page2["posts"]) == 1
    assert page1["pagination"]["total"] == 3
    assert page1["pagination"]["total_pages"] == 2
    assert {p["id"] for p in page1["posts"]}.isdisjoint({p["id"] for p in page2["posts"]})


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"limit": 101}, {"limit": 0}, {"page": 0}])
async def test_list_rejects_bad_pagination(async_client, params):
    r = await async_client.get(POSTS, params=params)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_list_filters(async_client, auth_headers):
    category = await _create_category(async_client, auth_headers)
    tag = await _create_tag(async_client, auth_headers)
    await _create_post(async_client, auth_headers, title="Con categoría", category_id=category["id"])
    await _create_post(async_client, auth_headers, title="Con tag", tag_ids=[tag["id"]])
    await _create_post(async_client, auth_headers, title="Sin nada", content="Habla de asyncio")

    by_category = (await async_client.get(POSTS, params={"category": category["id"]})).json()
    by_tag = (await async_client.get(POSTS, params={"tag": tag["id"]})).json()
    by_search = (await async_client.get(POSTS, params={"search": "asyncio"})).json()

    assert [p["slug"] for p in by_category["posts"]] == ["con-categoria"]
    assert [p["slug"] for p in by_tag["posts"]] == ["con-tag"]
    assert [p["slug"] for p in by_search["posts"]] == ["sin-nada"]


# ---------------------------------------------------------------------------
# Actualización y borrado
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_update_title_refreshes_slug(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"title": "Adiós mundo"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["post"]["slug"] == "adios-mundo"
    assert (await async_client.get(f"{POSTS}/hola-mundo")).status_code == 404


@pytest.mark.asyncio
async def test_update_title_same_normalized_form_keeps_slug(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"title": "¡Hola, Mundo!"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["post"]["slug"] == "hola-mundo"
    assert r.json()["post"]["title"] == "¡Hola, Mundo!"


@pytest.mark.asyncio
async def test_update_without_title_keeps_slug(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"content": "Nuevo"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["post"]["slug"] == "hola-mundo"
    assert r.json()["post"]["content"] == "Nuevo"


@pytest.mark.asyncio
async def test_rename_to_taken_slug_gets_suffix(async_client, auth_headers):
    await _create_post(async_client, auth_headers, title="Uno")
    await _create_post(async_client, auth_headers, title="Dos")

    r = await async_client.put(f"{POSTS}/dos", json={"title": "Uno"}, headers=auth_headers)

    assert r.json()["post"]["slug"] == "uno-1"


@pytest.mark.asyncio
async def test_publish_and_unpublish(async_client, auth_headers):
    await _create_post(async_client, auth_headers, published=False)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"published": True}, headers=auth_headers)
    assert r.json()["post"]["published_at"] is not None

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"published": False}, headers=auth_headers)
    assert r.json()["post"]["published"] is False
    assert r.json()["post"]["published_at"] is None


@pytest.mark.asyncio
async def test_update_replaces_tags(async_client, auth_headers):
    a = await _create_tag(async_client, auth_headers, "A")
    b = await _create_tag(async_client, auth_headers, "B")
    await _create_post(async_client, auth_headers, tag_ids=[a["id"]])

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"tag_ids": [b["id"]]}, headers=auth_headers)

    assert [t["name"] for t in r.json()["post"]["tags"]] == ["B"]


@pytest.mark.asyncio
async def test_only_author_can_update_or_delete(async_client, auth_headers, other_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"title": "Mío"}, headers=other_headers)
    assert r.status_code == 403
    assert r.json()["detail"]["error_code"] == "FORBIDDEN"

    r = await async_client.delete(f"{POSTS}/hola-mundo", headers=other_headers)
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_update_rejects_null_title(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.put(f"{POSTS}/hola-mundo", json={"title": None}, headers=auth_headers)

    assert r.status_code == 422


@pytest.mark.asyncio
async def test_delete_post(async_client, auth_headers):
    await _create_post(async_client, auth_headers)

    r = await async_client.delete(f"{POSTS}/hola-mundo", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Post eliminado"}

    assert (await async_client.get(f"{POSTS}/hola-mundo")).status_code == 404
    assert (await async_client.delete(f"{POSTS}/hola-mundo", headers=auth_headers)).status_code == 404
