"""Flattened path computation."""

from __future__ import annotations

from dataclasses import dataclass

ARRAY_ITEM_PLACEHOLDER = "*"
PATH_SEPARATOR = "."


@dataclass(frozen=True)
class NameSegment:
    """Segment contributed by a leaf, group or named tab."""

    name: str


@dataclass(frozen=True)
class ArrayItemSegment:
    """Segment shared by every row of an array field."""


@dataclass(frozen=True)
class BlockSegment:
    """Segment contributed by a block variant, optionally followed by a child name."""

    block_slug: str
    name: str | None = None


@dataclass(frozen=True)
class UnnamedTabSegment:
    """An unnamed tab adds nothing to its children's paths."""


PathSegment = NameSegment | ArrayItemSegment | BlockSegment | UnnamedTabSegment


def resolve_path(parent_path: str, segment: PathSegment) -> str:
    """Return the flattened path of `segment` below `parent_path`."""
    if isinstance(segment, UnnamedTabSegment):
        return parent_path
    if isinstance(segment, NameSegment):
        return _join(parent_path, segment.name)
    if isinstance(segment, ArrayItemSegment):
        return _join(parent_path, ARRAY_ITEM_PLACEHOLDER)
    if isinstance(segment, BlockSegment):
        block_path = _join(parent_path, segment.block_slug)
        return _join(block_path, segment.name) if segment.name else block_path
    raise TypeError(f"Unknown path segment: {segment!r}")


def _join(parent_path: str, token: str) -> str:
    return token if not parent_path else f"{parent_path}{PATH_SEPARATOR}{token}"
