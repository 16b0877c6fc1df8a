# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/models/category_models.py

Categorías del blog. Nombre y slug únicos (uq_categories_name / uq_categories_slug).

Autor: Equipo Tintero
Fecha: 2026-09-21
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.shared.database.transactions import now_utc

if TYPE_CHECKING:
    from .post_models import Post


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), onupdate=now_utc, nullable=False)

    posts: Mapped[List["Post"]] = relationship("Post", back_populates="category", lazy="noload")

    def __repr__(self) -> str:
        return f"<Category id={self.id} slug={self.slug!r}>"


__all__ = ["Category"]
