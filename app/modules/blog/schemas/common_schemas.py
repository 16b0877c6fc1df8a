# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/schemas/common_schemas.py

Schemas compartidos por los recursos del blog.
"""

from __future__ import annotations

import math

from app.shared.utils.base_models import UTF8SafeModel


class MessageResponse(UTF8SafeModel):
    message: str


class Pagination(UTF8SafeModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))


__all__ = ["MessageResponse", "Pagination"]
