# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/models/__init__.py

Registro de modelos del blog (orden: tablas referenciadas primero).
"""

from .category_models import Category
from .tag_models import Tag, post_tags
from .post_models import Post

__all__ = ["Category", "Tag", "Post", "post_tags"]
