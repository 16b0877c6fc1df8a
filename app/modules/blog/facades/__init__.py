# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/facades/__init__.py

Facades del blog. Uso:

    from app.modules.blog.facades import posts, categories, tags
    post = await posts.create(db, author_id=user.id, data=payload)
"""

from . import categories, posts, tags
from .errors import (
    BlogError,
    CategoryInUse,
    CategoryNotFound,
    InvalidReference,
    NameAlreadyExists,
    PermissionDenied,
    PostNotFound,
    SlugConflict,
    TagNotFound,
)

__all__ = [
    "categories",
    "posts",
    "tags",
    "BlogError",
    "CategoryInUse",
    "CategoryNotFound",
    "InvalidReference",
    "NameAlreadyExists",
    "PermissionDenied",
    "PostNotFound",
    "SlugConflict",
    "TagNotFound",
]
