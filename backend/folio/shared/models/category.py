"""
Category Entity Model

Optional grouping for projects and blog posts. Deleting a category leaves
its content uncategorized (FKs are SET NULL).
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """Admin-managed category with a slug derived from its name."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug={self.slug})>"
