# -*- coding: utf-8 -*-
"""
backend/tests/modules/blog/test_facade_base.py

Tests unitarios de las utilidades de slug de las facades del blog
(con AsyncMock, sin base de datos) y de la traducción de errores a HTTP.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.modules.blog.facades.base import (
    is_unique_violation,
    resolve_slug,
    slug_needs_refresh,
    write_with_slug_retry,
)
from app.modules.blog.facades.errors import (
    CategoryInUse,
    NameAlreadyExists,
    PermissionDenied,
    PostNotFound,
    SlugConflict,
)
from app.modules.blog.routes.deps import to_http
from app.shared.utils.slug_utils import InvalidInputError, SlugGenerationExhaustedError


def _integrity(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO posts ...", {}, Exception(message))


def _db() -> MagicMock:
    db = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


# ---------------------------------------------------------------------------
# is_unique_violation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "message, expected",
    [
        ("UNIQUE constraint failed: posts.slug", True),
        ('duplicate key value violates unique constraint "uq_posts_slug"', True),
        ('duplicate key value violates unique constraint "uq_categories_name"', False),
        ("FOREIGN KEY constraint failed", False),
    ],
)
def test_is_unique_violation(message, expected):
    assert is_unique_violation(_integrity(message), "posts", "slug") is expected


# ---------------------------------------------------------------------------
# slug_needs_refresh
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "current, old, new, expected",
    [
        ("hola-mundo", "Hola mundo", None, False),
        ("hola-mundo", "Hola mundo", "Hola mundo", False),
        ("hola-mundo", "Hola mundo", "¡Hola Mundo!", False),
        ("hola-mundo", "Hola mundo", "Adiós mundo", True),
    ],
)
def test_slug_needs_refresh(current, old, new, expected):
    assert slug_needs_refresh(current, old, new) is expected


# ---------------------------------------------------------------------------
# resolve_slug
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_resolve_slug_uses_repository_oracle_with_exclusion():
    repo = MagicMock()
    repo.slug_taken = AsyncMock(side_effect=[True, False])
    db = _db()

    slug = await resolve_slug(db, repo, "Mi Post", entity="post", exclude_id=7)

    assert slug == "mi-post-1"
    repo.slug_taken.assert_any_await(db, "mi-post", exclude_id=7)
    repo.slug_taken.assert_any_await(db, "mi-post-1", exclude_id=7)


@pytest.mark.asyncio
async def test_resolve_slug_propagates_generator_errors():
    repo = MagicMock()
    repo.slug_taken = AsyncMock(return_value=False)

    with pytest.raises(InvalidInputError):
        await resolve_slug(_db(), repo, "", entity="post")

    repo.slug_taken.assert_not_awaited()


# ---------------------------------------------------------------------------
# write_with_slug_retry
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_write_succeeds_first_time():
    db = _db()
    work = AsyncMock(return_value=10)

    assert await write_with_slug_retry(db, work, entity="post", table="posts") == 10
    work.assert_awaited_once()
    db.commit.assert_awaited_once()
    db.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_write_retries_whole_attempt_on_slug_collision():
    db = _db()
    db.commit.side_effect = [_integrity("UNIQUE constraint failed: posts.slug"), None]
    work = AsyncMock(return_value=10)

    result = await write_with_slug_retry(db, work, entity="post", table="posts")

    assert result == 10
    assert work.await_count == 2
    assert db.rollback.await_count == 1


@pytest.mark.asyncio
async def test_write_gives_up_with_slug_conflict():
    db = _db()
    db.commit.side_effect = _integrity("UNIQUE constraint failed: posts.slug")
    work = AsyncMock(return_value=10)

    with pytest.raises(SlugConflict) as exc_info:
        await write_with_slug_retry(db, work, entity="post", table="posts", max_writes=3)

    assert work.await_count == 3
    assert exc_info.value.attempts == 3


@pytest.mark.asyncio
async def test_write_does_not_retry_other_integrity_errors():
    db = _db()
    db.commit.side_effect = _integrity("UNIQUE constraint failed: categories.name")
    work = AsyncMock()

    with pytest.raises(IntegrityError):
        await write_with_slug_retry(db, work, entity="category", table="categories")

    work.assert_awaited_once()


@pytest.mark.asyncio
async def test_write_propagates_domain_errors_without_retry():
    db = _db()
    work = AsyncMock(side_effect=PostNotFound("x"))

    with pytest.raises(PostNotFound):
        await write_with_slug_retry(db, work, entity="post", table="posts")

    work.assert_awaited_once()
    db.rollback.assert_awaited_once()


# ---------------------------------------------------------------------------
# to_http
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "exc, status, code",
    [
        (PostNotFound("x"), 404, "NOT_FOUND"),
        (PermissionDenied("no"), 403, "FORBIDDEN"),
        (NameAlreadyExists("tag", "Python"), 409, "CONFLICT"),
        (CategoryInUse(1, 2), 409, "CONFLICT"),
        (SlugConflict("post", 3), 409, "SLUG_CONFLICT"),
        (InvalidInputError("vacío"), 400, "VALIDATION_ERROR"),
        (SlugGenerationExhaustedError("busy", 1000), 500, "SLUG_GENERATION_FAILED"),
    ],
)
def test_to_http_mapping(exc, status, code):
    http_exc = to_http(exc)
    assert http_exc.status_code == status
    assert http_exc.detail["error_code"] == code
