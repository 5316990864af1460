"""Schema map lookup use case."""

from __future__ import annotations

import logging
from pathlib import Path

from admin_form_schema.configuration.loader import load_configuration
from admin_form_schema.configuration.runtime_settings import AdminConfiguration
from admin_form_schema.field_definitions.definition_models import EntityIdentifier
from admin_form_schema.localization.label_resolution import (
    CatalogTranslator,
    LocalizationContext,
)
from admin_form_schema.schema_management.schema_models import FieldSchemaMap
from admin_form_schema.schema_management.schema_projection import build_field_schema_map

from .entity_schema_cache import SchemaCacheService
from .request_memoization import RequestMemoizer

_LOGGER = logging.getLogger(__name__)


def get_field_schema_map(
    identifier: EntityIdentifier,
    config: AdminConfiguration,
    localization: LocalizationContext,
    *,
    cache: SchemaCacheService,
    request: RequestMemoizer,
) -> FieldSchemaMap:
    """Return the flattened schema map rendering code should use for one entity."""
    return request.memoize(
        identifier,
        config,
        localization,
        lambda: cache.get(
            identifier,
            lambda: build_field_schema_map(identifier, config.field_tree(identifier), localization),
        ),
    )


def build_localization_context(
    config: AdminConfiguration, locale: str | None = None
) -> LocalizationContext:
    """Create the localization context for `locale`, or the configured default."""
    settings = config.localization
    translator = CatalogTranslator(
        settings.translations, fallback_locale=settings.fallback_locale
    )
    return LocalizationContext(translator=translator, locale=locale or settings.default_locale)


def reload_configuration(config_path: Path | str, cache: SchemaCacheService) -> AdminConfiguration:
    """Load the configuration again and mark every cached schema map stale."""
    configuration = load_configuration(config_path)
    cache.invalidate()
    _LOGGER.info("Reloaded admin configuration from %s", config_path)
    return configuration
