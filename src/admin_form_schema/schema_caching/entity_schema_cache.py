"""Process-wide cache of flattened entity schemas."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from admin_form_schema.field_definitions.definition_models import EntityIdentifier
from admin_form_schema.schema_management.schema_models import FieldSchemaMap

_LOGGER = logging.getLogger(__name__)

SchemaMapBuilder = Callable[[], FieldSchemaMap]


@dataclass(frozen=True)
class CacheEntry:
    """One stored schema map."""

    identifier: EntityIdentifier
    schema_map: FieldSchemaMap


@dataclass(frozen=True)
class CacheStatistics:
    """Counters describing cache usage since the service was created."""

    hits: int
    misses: int
    builds: int
    invalidations: int


class SchemaCacheService:
    """Stores at most one schema map per entity for each validity epoch.

    Create one instance at process start and pass it to every lookup. Calling
    `invalidate` marks every stored map stale; the next `get` from any thread
    discards the whole store before serving, so each entity is rebuilt once.
    A builder that raises leaves nothing behind, and the next `get` retries.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[EntityIdentifier, CacheEntry] = {}
        self._build_locks: dict[EntityIdentifier, threading.Lock] = {}
        self._invalidation_requested = False
        self._epoch = 0
        self._hits = 0
        self._misses = 0
        self._builds = 0
        self._invalidations = 0

    def invalidate(self) -> None:
        """Request a full rebuild; consumed by the next `get`."""
        with self._lock:
            self._invalidation_requested = True

    def get(self, identifier: EntityIdentifier, build: SchemaMapBuilder) -> FieldSchemaMap:
        with self._lock:
            self._consume_invalidation()
            entry = self._entries.get(identifier)
            if entry is not None:
                self._hits += 1
                return entry.schema_map
            build_lock = self._build_locks.setdefault(identifier, threading.Lock())

        with build_lock:
            with self._lock:
                self._consume_invalidation()
                entry = self._entries.get(identifier)
                if entry is not None:
                    self._hits += 1
                    return entry.schema_map
                self._misses += 1
                epoch = self._epoch

            _LOGGER.debug("Building schema map for %s", identifier)
            schema_map = build()

            with self._lock:
                self._builds += 1
                if epoch == self._epoch:
                    self._entries[identifier] = CacheEntry(
                        identifier=identifier, schema_map=schema_map
                    )
                else:
                    _LOGGER.debug(
                        "Discarding schema map for %s built before invalidation", identifier
                    )
            return schema_map

    def cached_identifiers(self) -> tuple[EntityIdentifier, ...]:
        with self._lock:
            return tuple(self._entries)

    def statistics(self) -> CacheStatistics:
        with self._lock:
            return CacheStatistics(
                hits=self._hits,
                misses=self._misses,
                builds=self._builds,
                invalidations=self._invalidations,
            )

    def _consume_invalidation(self) -> None:
        if not self._invalidation_requested:
            return
        _LOGGER.info("Schema maps invalidated; discarding %d cached entities", len(self._entries))
        self._entries = {}
        self._invalidation_requested = False
        self._epoch += 1
        self._invalidations += 1
