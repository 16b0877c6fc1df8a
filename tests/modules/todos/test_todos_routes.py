# -*- coding: utf-8 -*-
"""
backend/tests/modules/todos/test_todos_routes.py

Tests de integración de /api/todos: CRUD propio, orden del listado,
filtros y mantenimiento de completed_at.
"""

import pytest

TODOS = "/api/todos"


async def _create(client, headers, **body):
    body.setdefault("title", "Tarea")
    r = await client.post(TODOS, json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["todo"]


@pytest.mark.asyncio
async def test_create_todo_defaults(async_client, auth_headers):
    todo = await _create(async_client, auth_headers, title="Escribir post")

    assert todo["status"] == "TODO"
    assert todo["priority"] == "MEDIUM"
    assert todo["completed_at"] is None
    assert todo["due_date"] is None


@pytest.mark.asyncio
async def test_todos_require_auth(async_client):
    assert (await async_client.get(TODOS)).status_code == 401
    assert (await async_client.post(TODOS, json={"title": "x"})).status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"title": ""}, {"title": "x" * 101}, {"title": "ok", "priority": "URGENT"}, {"title": "ok", "description": "d" * 1001}],
)
async def test_create_validation(async_client, auth_headers, body):
    r = await async_client.post(TODOS, json=body, headers=auth_headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_list_order_priority_due_date_created(async_client, auth_headers):
    await _create(async_client, auth_headers, title="low", priority="LOW")
    await _create(async_client, auth_headers, title="medium-sin-fecha")
    await _create(async_client, auth_headers, title="medium-tarde", due_date="2026-12-01T00:00:00Z")
    await _create(async_client, auth_headers, title="medium-pronto", due_date="2026-10-01T00:00:00Z")
    await _create(async_client, auth_headers, title="high-1", priority="HIGH")
    await _create(async_client, auth_headers, title="high-2", priority="HIGH")

    r = await async_client.get(TODOS, headers=auth_headers)

    assert r.status_code == 200
    assert [t["title"] for t in r.json()["todos"]] == [
        "high-2",
        "high-1",
        "medium-pronto",
        "medium-tarde",
        "medium-sin-fecha",
        "low",
    ]


@pytest.mark.asyncio
async def test_list_filters(async_client, auth_headers):
    a = await _create(async_client, auth_headers, title="a", priority="HIGH")
    await _create(async_client, auth_headers, title="b", priority="LOW")
    await async_client.put(f"{TODOS}/{a['id']}", json={"status": "IN_PROGRESS"}, headers=auth_headers)

    by_status = (await async_client.get(TODOS, params={"status": "IN_PROGRESS"}, headers=auth_headers)).json()
    by_priority = (await async_client.get(TODOS, params={"priority": "LOW"}, headers=auth_headers)).json()

    assert [t["title"] for t in by_status["todos"]] == ["a"]
    assert [t["title"] for t in by_priority["todos"]] == ["b"]


@pytest.mark.asyncio
async def test_completed_at_set_and_cleared(async_client, auth_headers):
    todo = await _create(async_client, auth_headers)
    url = f"{TODOS}/{todo['id']}"

    done = (await async_client.put(url, json={"status": "DONE"}, headers=auth_headers)).json()["todo"]
    assert done["status"] == "DONE"
    assert done["completed_at"] is not None

    again = (await async_client.put(url, json={"title": "Renombrada"}, headers=auth_headers)).json()["todo"]
    assert again["completed_at"] == done["completed_at"]

    reopened = (await async_client.put(url, json={"status": "TODO"}, headers=auth_headers)).json()["todo"]
    assert reopened["status"] == "TODO"
    assert reopened["completed_at"] is None


@pytest.mark.asyncio
async def test_update_clears_due_date(async_client, auth_headers):
    todo = await _create(async_client, auth_headers, due_date="2026-10-01T00:00:00Z")

    r = await async_client.put(f"{TODOS}/{todo['id']}", json={"due_date": None}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["todo"]["due_date"] is None


@pytest.mark.asyncio
async def test_update_rejects_null_status(async_client, auth_headers):
    todo = await _create(async_client, auth_headers)

    r = await async_client.put(f"{TODOS}/{todo['id']}", json={"status": None}, headers=auth_headers)

    assert r.status_code == 422


@pytest.mark.asyncio
async def test_other_users_todos_are_invisible(async_client, auth_headers, other_headers):
    todo = await _create(async_client, auth_headers)
    url = f"{TODOS}/{todo['id']}"

    assert (await async_client.get(url, headers=other_headers)).status_code == 404
    assert (await async_client.put(url, json={"title": "x"}, headers=other_headers)).status_code == 404
    assert (await async_client.delete(url, headers=other_headers)).status_code == 404
    assert (await async_client.get(TODOS, headers=other_headers)).json()["todos"] == []

    assert (await async_client.get(url, headers=auth_headers)).status_code == 200


@pytest.mark.asyncio
async def test_delete_todo(async_client, auth_headers):
    todo = await _create(async_client, auth_headers)
    url = f"{TODOS}/{todo['id']}"

    r = await async_client.delete(url, headers=auth_headers)

    assert r.status_code == 200
    assert r.json() == {"message": "Todo eliminado"}
    assert (await async_client.get(url, headers=auth_headers)).status_code == 404
