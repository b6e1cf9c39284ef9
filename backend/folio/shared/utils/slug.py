"""
Slug generation for categories, tags and blog posts.

    slugify("Web Dev")                         → "web-dev"
    slugify(" Hello  World! ", strict=True)    → "hello-world"

Both forms are deterministic and idempotent. Collisions are left to the
caller; no numeric suffix is ever appended here.
"""

import re

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def slugify(value: str, strict: bool = False) -> str:
    """
    Turn a display name into a URL identifier.

    Args:
        value: Display name or title
        strict: Also drop everything outside [a-z0-9-], collapse repeated
            hyphens and trim hyphens from both ends (used for blog titles)

    Returns:
        The slug. May be empty in strict mode when value has no ASCII
        letters or digits.
    """
    slug = _WHITESPACE.sub("-", value.lower())
    if strict:
        slug = _NON_SLUG.sub("", slug)
        slug = _HYPHEN_RUNS.sub("-", slug).strip("-")
    return slug
