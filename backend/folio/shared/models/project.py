"""
Project Entity Model

A portfolio entry. Tags are linked through project_tags (see tag.py).

SAMPLE PROJECT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 12                                                        │
│ title            │ "Demo"                                                    │
│ description      │ "A small demo app"                                        │
│ category_id      │ 2 (nullable)                                              │
│ image_url        │ "/uploads/3f2c....png" (nullable)                         │
│ created_by       │ 1                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base, TimestampMixin


class Project(Base, TimestampMixin):
    """Portfolio project."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_by: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title={self.title})>"
