"""Per-request memoization of schema map lookups."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from admin_form_schema.field_definitions.definition_models import EntityIdentifier
from admin_form_schema.localization.label_resolution import LocalizationContext, Translator
from admin_form_schema.schema_management.schema_models import FieldSchemaMap


@dataclass(frozen=True)
class _MemoizedLookup:
    config: Any
    translator: Translator
    schema_map: FieldSchemaMap


class RequestMemoizer:
    """Collapses repeated lookups issued while serving one request.

    Create one memoizer per request and drop it when the request ends.
    Identifiers, locales and translators match by value; the configuration
    object matches by identity. Translators only need `==`, not hashing.
    Failed lookups are not remembered.
    """

    def __init__(self) -> None:
        self._lookups: dict[tuple[EntityIdentifier, int, str], list[_MemoizedLookup]] = {}

    def memoize(
        self,
        identifier: EntityIdentifier,
        config: Any,
        localization: LocalizationContext,
        compute: Callable[[], FieldSchemaMap],
    ) -> FieldSchemaMap:
        key = (identifier, id(config), localization.locale)
        candidates = self._lookups.get(key, [])
        for memoized in candidates:
            if memoized.config is config and memoized.translator == localization.translator:
                return memoized.schema_map

        schema_map = compute()
        self._lookups.setdefault(key, []).append(
            _MemoizedLookup(
                config=config, translator=localization.translator, schema_map=schema_map
            )
        )
        return schema_map

    def __len__(self) -> int:
        return sum(len(candidates) for candidates in self._lookups.values())
