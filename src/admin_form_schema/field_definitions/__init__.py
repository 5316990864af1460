"""Field definition exports."""

from .definition_models import (
    LAYOUT_KINDS,
    LEAF_FIELD_TYPES,
    ArrayField,
    Block,
    BlocksField,
    EntityIdentifier,
    FieldNode,
    GroupField,
    InvalidEntityIdentifier,
    LayoutField,
    LeafField,
    Tab,
    TabsField,
)

__all__ = [
    "ArrayField",
    "Block",
    "BlocksField",
    "EntityIdentifier",
    "FieldNode",
    "GroupField",
    "InvalidEntityIdentifier",
    "LAYOUT_KINDS",
    "LEAF_FIELD_TYPES",
    "LayoutField",
    "LeafField",
    "Tab",
    "TabsField",
]
