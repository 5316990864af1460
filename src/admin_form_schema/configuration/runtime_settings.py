"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from admin_form_schema.field_definitions.definition_models import EntityIdentifier, FieldNode


class UnknownEntityError(LookupError):
    """Raised when an identifier names an entity absent from the configuration."""


@dataclass(frozen=True)
class LocalizationSettings:
    """Locale defaults and translation catalogs."""

    default_locale: str
    fallback_locale: str | None
    translations: Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class EntityConfig:
    """Field tree configured for one collection or global."""

    identifier: EntityIdentifier
    fields: tuple[FieldNode, ...]
    label: str | None = None


@dataclass(frozen=True)
class AdminConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None
    collections: Mapping[str, EntityConfig]
    globals: Mapping[str, EntityConfig]
    localization: LocalizationSettings

    def entity(self, identifier: EntityIdentifier) -> EntityConfig:
        entities = self.collections if identifier.collection_slug else self.globals
        entity = entities.get(identifier.slug)
        if entity is None:
            raise UnknownEntityError(
                f"No {identifier.kind} configured with slug '{identifier.slug}'."
            )
        return entity

    def field_tree(self, identifier: EntityIdentifier) -> tuple[FieldNode, ...]:
        return self.entity(identifier).fields
