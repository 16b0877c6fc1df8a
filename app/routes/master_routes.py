# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro de la API: todos los módulos se montan bajo /api.

  /api/auth/*        registro y login
  /api/profile/*     perfil del usuario autenticado
  /api/posts/*       posts del blog
  /api/categories/*  categorías
  /api/tags/*        tags
  /api/todos/*       tareas personales

Autor: Equipo Tintero
Fecha: 2026-09-26
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.auth.routes import get_auth_routers
from app.modules.blog.routes import get_blog_routers
from app.modules.todos.routes import get_todos_routers
from app.modules.user_profile.routes import user_profile_router

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


def _tag(router: APIRouter) -> str:
    return str(router.tags[0]) if router.tags else "unknown"


# ─────────────────────────────────────────
# AUTH
# ─────────────────────────────────────────
for r in get_auth_routers():
    _include(api, r, f"auth.{_tag(r)}")

# ─────────────────────────────────────────
# PROFILE
# ─────────────────────────────────────────
_include(api, user_profile_router, "user_profile")

# ─────────────────────────────────────────
# BLOG (posts, categorías, tags)
# ─────────────────────────────────────────
for r in get_blog_routers():
    _include(api, r, f"blog.{_tag(r)}")

# ─────────────────────────────────────────
# TODOS
# ─────────────────────────────────────────
for r in get_todos_routers():
    _include(api, r, f"todos.{_tag(r)}")


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["api", "loaded_routers"]
