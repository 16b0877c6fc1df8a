# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/schemas/post_schemas.py

Schemas Pydantic de posts.

- PostCreate: alta; el slug nunca lo envía el cliente, se deriva del título.
- PostUpdate: actualización parcial tipada (solo cuentan los campos enviados).
- PostRead / PostListItem: respuestas con autor, categoría y tags.

Autor: Equipo Tintero
Fecha: 2026-09-22
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AnyHttpUrl, ConfigDict, PositiveInt, field_validator

from app.shared.utils.base_models import UTF8SafeModel, PartialUpdateModel, Field
from .common_schemas import Pagination


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class PostCreate(UTF8SafeModel):
    title: str = Field(..., min_length=1, max_length=200, description="Título (origen del slug)")
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    cover_image: Optional[AnyHttpUrl] = None
    category_id: Optional[PositiveInt] = None
    tag_ids: List[PositiveInt] = Field(default_factory=list)
    published: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hola mundo",
                "content": "Primer post",
                "tag_ids": [1, 2],
                "published": True,
            }
        }
    )

    def to_values(self) -> dict:
        data = self.model_dump()
        if data["cover_image"] is not None:
            data["cover_image"] = str(data["cover_image"])
        return data


class PostUpdate(PartialUpdateModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    cover_image: Optional[AnyHttpUrl] = None
    category_id: Optional[PositiveInt] = None
    tag_ids: Optional[List[PositiveInt]] = None
    published: Optional[bool] = None

    @field_validator("title", "content", "published", "tag_ids")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("No puede ser null")
        return v

    def changes(self) -> dict:
        data = super().changes()
        if data.get("cover_image") is not None:
            data["cover_image"] = str(data["cover_image"])
        return data


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class AuthorSummary(UTF8SafeModel):
    id: int
    name: Optional[str] = None
    image: Optional[str] = None


class CategorySummary(UTF8SafeModel):
    id: int
    name: str
    slug: str


class TagSummary(UTF8SafeModel):
    id: int
    name: str
    slug: str


class PostListItem(UTF8SafeModel):
    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    author: AuthorSummary
    category: Optional[CategorySummary] = None
    tags: List[TagSummary] = []
    published_at: Optional[datetime] = None
    created_at: datetime


class PostRead(PostListItem):
    content: str
    published: bool
    updated_at: datetime


class PostEnvelope(UTF8SafeModel):
    post: PostRead


class PostListResponse(UTF8SafeModel):
    posts: List[PostListItem]
    pagination: Pagination


__all__ = [
    "PostCreate",
    "PostUpdate",
    "AuthorSummary",
    "CategorySummary",
    "TagSummary",
    "PostListItem",
    "PostRead",
    "PostEnvelope",
    "PostListResponse",
]
