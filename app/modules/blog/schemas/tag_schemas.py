# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/schemas/tag_schemas.py

Schemas Pydantic de tags.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import field_validator

from app.shared.utils.base_models import UTF8SafeModel, PartialUpdateModel, Field


class TagCreate(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=50, description="Nombre visible (único)")


class TagUpdate(PartialUpdateModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("El nombre no puede ser null")
        return v


class TagRead(UTF8SafeModel):
    id: int
    name: str
    slug: str
    post_count: int = Field(0, description="Posts publicados con este tag")


class TagEnvelope(UTF8SafeModel):
    tag: TagRead


class TagListResponse(UTF8SafeModel):
    tags: List[TagRead]


__all__ = ["TagCreate", "TagUpdate", "TagRead", "TagEnvelope", "TagListResponse"]
