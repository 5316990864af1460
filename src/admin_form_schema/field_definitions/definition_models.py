"""Field definition entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class InvalidEntityIdentifier(ValueError):
    """Raised when an entity identifier names both or neither of collection/global."""


@dataclass(frozen=True)
class EntityIdentifier:
    """Identifies one collection or global content model."""

    collection_slug: str | None = None
    global_slug: str | None = None

    def __post_init__(self) -> None:
        has_collection = bool(self.collection_slug)
        has_global = bool(self.global_slug)
        if has_collection == has_global:
            raise InvalidEntityIdentifier(
                "Exactly one of collection_slug or global_slug must be provided."
            )

    @property
    def kind(self) -> str:
        return "collection" if self.collection_slug else "global"

    @property
    def slug(self) -> str:
        return self.collection_slug or self.global_slug or ""

    def __str__(self) -> str:
        return f"{self.kind}:{self.slug}"


@dataclass(frozen=True)
class LeafField:
    """Terminal field rendered as one form control."""

    name: str
    field_type: str
    label: str | None = None
    required: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GroupField:
    """Named container whose children share the group path."""

    name: str
    fields: tuple[FieldNode, ...] = ()
    label: str | None = None


@dataclass(frozen=True)
class ArrayField:
    """Repeatable container; `fields` is the template of one row."""

    name: str
    fields: tuple[FieldNode, ...] = ()
    label: str | None = None


@dataclass(frozen=True)
class Block:
    """One variant of a blocks field."""

    slug: str
    fields: tuple[FieldNode, ...] = ()
    label: str | None = None


@dataclass(frozen=True)
class BlocksField:
    """Polymorphic container holding a set of block variants."""

    name: str
    blocks: tuple[Block, ...] = ()
    label: str | None = None


@dataclass(frozen=True)
class Tab:
    """A tab nests its fields under `name`, or splices them into the parent when unnamed."""

    fields: tuple[FieldNode, ...] = ()
    name: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class TabsField:
    """Tab strip container; contributes no path segment of its own."""

    tabs: tuple[Tab, ...] = ()


@dataclass(frozen=True)
class LayoutField:
    """Presentational wrapper such as a row or collapsible."""

    layout: str
    fields: tuple[FieldNode, ...] = ()
    label: str | None = None


FieldNode = LeafField | GroupField | ArrayField | BlocksField | TabsField | LayoutField

LAYOUT_KINDS = ("row", "collapsible")

LEAF_FIELD_TYPES = (
    "checkbox",
    "code",
    "date",
    "email",
    "json",
    "number",
    "password",
    "point",
    "radio",
    "relationship",
    "richText",
    "select",
    "text",
    "textarea",
    "ui",
    "upload",
)
