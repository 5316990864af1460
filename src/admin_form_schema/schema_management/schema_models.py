"""Schema management entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class FieldSchemaEntry:
    """Flattened metadata of one leaf field."""

    path: str
    name: str
    field_type: str
    label: str
    required: bool
    metadata: Mapping[str, Any]

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.field_type,
            "label": self.label,
            "required": self.required,
            "metadata": dict(self.metadata),
        }


class FieldSchemaMap(Mapping[str, FieldSchemaEntry]):
    """Read-only mapping from flattened path to leaf entry.

    Only leaf fields are keyed; groups, arrays, blocks and tabs contribute
    path segments but have no entry of their own. Iteration follows
    definition order.
    """

    def __init__(self, entries: Mapping[str, FieldSchemaEntry] | None = None) -> None:
        self._entries: Mapping[str, FieldSchemaEntry] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, path: str) -> FieldSchemaEntry:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FieldSchemaMap({list(self._entries)!r})"

    def paths(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def to_payload(self) -> dict[str, dict[str, Any]]:
        """Return a JSON-serializable copy keyed by path."""
        return {path: entry.to_payload() for path, entry in self._entries.items()}
