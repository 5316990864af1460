"""Path resolution tests."""

from __future__ import annotations

from admin_form_schema.schema_management.path_resolution import (
    ARRAY_ITEM_PLACEHOLDER,
    ArrayItemSegment,
    BlockSegment,
    NameSegment,
    UnnamedTabSegment,
    resolve_path,
)


def test_name_segment_at_root_has_no_separator() -> None:
    assert resolve_path("", NameSegment("title")) == "title"


def test_name_segment_is_appended_to_parent() -> None:
    assert resolve_path("meta", NameSegment("description")) == "meta.description"


def test_array_item_segment_uses_fixed_placeholder() -> None:
    assert ARRAY_ITEM_PLACEHOLDER == "*"
    assert resolve_path("links", ArrayItemSegment()) == "links.*"


def test_block_segment_embeds_block_slug_before_field_name() -> None:
    assert resolve_path("sections", BlockSegment("hero", "text")) == "sections.hero.text"
    assert resolve_path("sections", BlockSegment("quote")) == "sections.quote"


def test_unnamed_tab_segment_returns_parent_unchanged() -> None:
    assert resolve_path("", UnnamedTabSegment()) == ""
    assert resolve_path("meta", UnnamedTabSegment()) == "meta"
