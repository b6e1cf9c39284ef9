import pytest

from folio.shared.utils.slug import slugify


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Web Dev", "web-dev"),
        ("AI", "ai"),
        ("Machine   Learning", "machine-learning"),
        ("C++ tips", "c++-tips"),
    ],
)
def test_lenient_slug_only_lowercases_and_hyphenates(value, expected):
    assert slugify(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (" Hello  World! ", "hello-world"),
        ("Hello, World!", "hello-world"),
        ("--Already--slugged--", "already-slugged"),
        ("FastAPI & SQLAlchemy 2.0", "fastapi-sqlalchemy-20"),
    ],
)
def test_strict_slug(value, expected):
    assert slugify(value, strict=True) == expected


def test_strict_slug_can_be_empty():
    assert slugify("!!! ???", strict=True) == ""


@pytest.mark.parametrize("value", ["Hello World", " Hello  World! ", "Ünïcode Title 42"])
def test_slugify_is_idempotent(value):
    once = slugify(value, strict=True)
    assert slugify(once, strict=True) == once
    lenient = slugify(value)
    assert slugify(lenient) == lenient
