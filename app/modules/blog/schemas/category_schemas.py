# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/schemas/category_schemas.py

Schemas Pydantic de categorías.

Autor: Equipo Tintero
Fecha: 2026-09-22
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, field_validator

from app.shared.utils.base_models import UTF8SafeModel, PartialUpdateModel, Field


class CategoryCreate(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=100, description="Nombre visible (único)")
    description: Optional[str] = Field(default=None, max_length=1000)

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Tecnología", "description": "Artículos técnicos"}}
    )


class CategoryUpdate(PartialUpdateModel):
    """`description` acepta null para limpiarla; `name` no."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("El nombre no puede ser null")
        return v


class CategoryRead(UTF8SafeModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    post_count: int = 0


class CategoryEnvelope(UTF8SafeModel):
    category: CategoryRead


class CategoryListResponse(UTF8SafeModel):
    categories: List[CategoryRead]


__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "CategoryEnvelope",
    "CategoryListResponse",
]
