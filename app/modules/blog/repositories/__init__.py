# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/repositories/__init__.py
"""

from .category_repository import CategoryRepository, category_repository
from .tag_repository import TagRepository, tag_repository
from .post_repository import PostRepository, PostFilters, post_repository

__all__ = [
    "CategoryRepository",
    "TagRepository",
    "PostRepository",
    "PostFilters",
    "category_repository",
    "tag_repository",
    "post_repository",
]
