"""Schema caching exports."""

from .entity_schema_cache import CacheEntry, CacheStatistics, SchemaCacheService
from .request_memoization import RequestMemoizer
from .schema_map_lookup import (
    build_localization_context,
    get_field_schema_map,
    reload_configuration,
)

__all__ = [
    "CacheEntry",
    "CacheStatistics",
    "RequestMemoizer",
    "SchemaCacheService",
    "build_localization_context",
    "get_field_schema_map",
    "reload_configuration",
]
