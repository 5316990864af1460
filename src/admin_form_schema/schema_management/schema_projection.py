"""Field tree flattening service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType

from admin_form_schema.field_definitions.definition_models import (
    ArrayField,
    BlocksField,
    EntityIdentifier,
    FieldNode,
    GroupField,
    LayoutField,
    LeafField,
    TabsField,
)
from admin_form_schema.localization.label_resolution import LocalizationContext, resolve_label

from .path_resolution import (
    ArrayItemSegment,
    BlockSegment,
    NameSegment,
    UnnamedTabSegment,
    resolve_path,
)
from .schema_models import FieldSchemaEntry, FieldSchemaMap

_LOGGER = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised when a field tree cannot be flattened."""


class UnsupportedFieldKind(SchemaError):
    """Raised for field tree nodes the walker does not know how to flatten."""


class DuplicateFieldPath(SchemaError):
    """Raised when two leaf fields resolve to the same flattened path."""


def build_field_schema_map(
    identifier: EntityIdentifier,
    field_tree: Sequence[FieldNode],
    localization: LocalizationContext,
) -> FieldSchemaMap:
    """Return the flattened, path-keyed schema of one entity's field tree."""
    entries: dict[str, FieldSchemaEntry] = {}
    _flatten_fields(field_tree, prefix="", entries=entries, localization=localization)
    _LOGGER.debug("Flattened %d fields for %s", len(entries), identifier)
    return FieldSchemaMap(entries)


def _flatten_fields(
    nodes: Sequence[FieldNode],
    *,
    prefix: str,
    entries: dict[str, FieldSchemaEntry],
    localization: LocalizationContext,
) -> None:
    for node in nodes:
        _flatten_node(node, prefix=prefix, entries=entries, localization=localization)


def _flatten_node(
    node: FieldNode,
    *,
    prefix: str,
    entries: dict[str, FieldSchemaEntry],
    localization: LocalizationContext,
) -> None:
    if isinstance(node, LeafField):
        path = resolve_path(prefix, NameSegment(node.name))
        _register_field(path, node, entries, localization)
        return

    if isinstance(node, GroupField):
        group_path = resolve_path(prefix, NameSegment(node.name))
        _flatten_fields(node.fields, prefix=group_path, entries=entries, localization=localization)
        return

    if isinstance(node, ArrayField):
        item_path = resolve_path(resolve_path(prefix, NameSegment(node.name)), ArrayItemSegment())
        _flatten_fields(node.fields, prefix=item_path, entries=entries, localization=localization)
        return

    if isinstance(node, BlocksField):
        blocks_path = resolve_path(prefix, NameSegment(node.name))
        for block in node.blocks:
            block_path = resolve_path(blocks_path, BlockSegment(block.slug))
            _flatten_fields(
                block.fields, prefix=block_path, entries=entries, localization=localization
            )
        return

    if isinstance(node, TabsField):
        for tab in node.tabs:
            segment = NameSegment(tab.name) if tab.name else UnnamedTabSegment()
            tab_path = resolve_path(prefix, segment)
            _flatten_fields(tab.fields, prefix=tab_path, entries=entries, localization=localization)
        return

    if isinstance(node, LayoutField):
        _flatten_fields(node.fields, prefix=prefix, entries=entries, localization=localization)
        return

    raise UnsupportedFieldKind(f"Unsupported field kind: {type(node).__name__}")


def _register_field(
    path: str,
    node: LeafField,
    entries: dict[str, FieldSchemaEntry],
    localization: LocalizationContext,
) -> None:
    if not path:
        raise SchemaError("Cannot register a field without a path.")
    if path in entries:
        raise DuplicateFieldPath(f"Duplicate flattened field detected: {path}")
    entries[path] = FieldSchemaEntry(
        path=path,
        name=node.name,
        field_type=node.field_type,
        label=resolve_label(node.name, node.label, localization),
        required=node.required,
        metadata=MappingProxyType(dict(node.metadata)),
    )
