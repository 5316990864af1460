"""Schema management exports."""

from .path_resolution import (
    ARRAY_ITEM_PLACEHOLDER,
    ArrayItemSegment,
    BlockSegment,
    NameSegment,
    UnnamedTabSegment,
    resolve_path,
)
from .schema_models import FieldSchemaEntry, FieldSchemaMap
from .schema_projection import (
    DuplicateFieldPath,
    SchemaError,
    UnsupportedFieldKind,
    build_field_schema_map,
)

__all__ = [
    "ARRAY_ITEM_PLACEHOLDER",
    "ArrayItemSegment",
    "BlockSegment",
    "DuplicateFieldPath",
    "FieldSchemaEntry",
    "FieldSchemaMap",
    "NameSegment",
    "SchemaError",
    "UnnamedTabSegment",
    "UnsupportedFieldKind",
    "build_field_schema_map",
    "resolve_path",
]
