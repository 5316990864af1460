"""Field definition entity tests."""

from __future__ import annotations

import pytest
from admin_form_schema.field_definitions.definition_models import (
    EntityIdentifier,
    InvalidEntityIdentifier,
)


def test_collection_identifier_exposes_kind_and_slug() -> None:
    identifier = EntityIdentifier(collection_slug="posts")

    assert identifier.kind == "collection"
    assert identifier.slug == "posts"
    assert str(identifier) == "collection:posts"


def test_global_identifier_is_value_equal_and_hashable() -> None:
    first = EntityIdentifier(global_slug="settings")
    second = EntityIdentifier(global_slug="settings")

    assert first == second
    assert {first: 1}[second] == 1
    assert first != EntityIdentifier(collection_slug="settings")


@pytest.mark.parametrize(
    "slugs",
    [
        {},
        {"collection_slug": "posts", "global_slug": "settings"},
        {"collection_slug": "", "global_slug": None},
    ],
)
def test_identifier_requires_exactly_one_slug(slugs: dict[str, str | None]) -> None:
    with pytest.raises(InvalidEntityIdentifier, match="Exactly one"):
        EntityIdentifier(**slugs)
