# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/schemas/__init__.py
"""

from .common_schemas import MessageResponse, Pagination
from .category_schemas import (
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    CategoryEnvelope,
    CategoryListResponse,
)
from .tag_schemas import (
    TagCreate,
    TagUpdate,
    TagRead,
    TagEnvelope,
    TagListResponse,
)
from .post_schemas import (
    AuthorSummary,
    CategorySummary,
    TagSummary,
    PostCreate,
    PostUpdate,
    PostRead,
    PostListItem,
    PostEnvelope,
    PostListResponse,
)

__all__ = [
    "MessageResponse",
    "Pagination",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "CategoryEnvelope",
    "CategoryListResponse",
    "TagCreate",
    "TagUpdate",
    "TagRead",
    "TagEnvelope",
    "TagListResponse",
    "AuthorSummary",
    "CategorySummary",
    "TagSummary",
    "PostCreate",
    "PostUpdate",
    "PostRead",
    "PostListItem",
    "PostEnvelope",
    "PostListResponse",
]
