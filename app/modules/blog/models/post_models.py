# -*- coding: utf-8 -*-
"""
backend/app/modules/blog/models/post_models.py

Posts del blog.

- slug único (uq_posts_slug): la facade reintenta la escritura si
  otro request ocupa el slug entre la resolución y el commit.
- published_at se fija en la primera publicación y se limpia al despublicar.
- author/category/tags se cargan con selectin (la API siempre los devuelve).

Autor: Equipo Tintero
Fecha: 2026-09-21
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.shared.database.transactions import now_utc
from app.modules.auth.models.user_models import User
from .category_models import Category
from .tag_models import Tag, post_tags


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    cover_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    published: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    author_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id: Mapped[Optional[int]] = mapped_column(ForeignKey("categories.id"), nullable=True, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, server_default=func.now(), onupdate=now_utc, nullable=False)

    author: Mapped[User] = relationship(User, lazy="selectin")
    category: Mapped[Optional[Category]] = relationship(Category, back_populates="posts", lazy="selectin")
    tags: Mapped[List[Tag]] = relationship(
        Tag, secondary=post_tags, back_populates="posts", lazy="selectin", order_by=Tag.name
    )

    __table_args__ = (
        Index("ix_posts_published_published_at", "published", "published_at"),
    )

    def __repr__(self) -> str:
        return f"<Post id={self.id} slug={self.slug!r} published={self.published}>"


__all__ = ["Post"]
