"""
Field rules shared by the project and blog post services.
"""

from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import ValidationError
from folio.shared.models.tag import TAG_NAME_MAX_LENGTH
from folio.shared.repositories.category_repository import CategoryRepository
from folio.shared.services.tag_service import normalize_tag_names
from folio.shared.utils.slug import slugify


def require_text(**fields: Optional[str]) -> dict[str, str]:
    """
    Trim required text fields, failing on the first empty one.

    Fields are checked in keyword order.

    Raises:
        ValidationError: details={"field": <name>}
    """
    cleaned: dict[str, str] = {}
    for field, value in fields.items():
        value = (value or "").strip()
        if not value:
            raise ValidationError(f"{field.capitalize()} is required", details={"field": field})
        cleaned[field] = value
    return cleaned


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank strings are stored as NULL."""
    if value is None:
        return None
    value = value.strip()
    return value or None


async def check_category(session: AsyncSession, category_id: Optional[int]) -> Optional[int]:
    """
    Raises:
        ValidationError: category_id is set but no such category exists
    """
    if category_id is None:
        return None
    if not await CategoryRepository(session).exists(category_id):
        raise ValidationError(
            f"Category with id '{category_id}' does not exist",
            details={"field": "category_id"},
        )
    return category_id


def check_tags(names: Iterable[str]) -> list[str]:
    """
    Normalize tag names and make sure each fits the tags table.

    Raises:
        ValidationError: A name (or its slug) is longer than the column
    """
    cleaned = normalize_tag_names(names)
    for name in cleaned:
        if len(name) > TAG_NAME_MAX_LENGTH or len(slugify(name)) > TAG_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Tag names are limited to {TAG_NAME_MAX_LENGTH} characters",
                details={"field": "tags"},
            )
    return cleaned
