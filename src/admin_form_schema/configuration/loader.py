"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from admin_form_schema.field_definitions.definition_models import (
    LAYOUT_KINDS,
    LEAF_FIELD_TYPES,
    ArrayField,
    Block,
    BlocksField,
    EntityIdentifier,
    FieldNode,
    GroupField,
    LayoutField,
    LeafField,
    Tab,
    TabsField,
)

from .runtime_settings import AdminConfiguration, EntityConfig, LocalizationSettings

DEFAULT_LOCALE = "en"

_LEAF_RESERVED_KEYS = frozenset({"name", "type", "label", "required"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> AdminConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_configuration(parsed, path=path)


def parse_configuration(
    parsed: Mapping[str, Any], *, path: Path | None = None
) -> AdminConfiguration:
    """Validate an already-decoded configuration mapping."""
    collections = _parse_entities_section(parsed.get("collections"), "collections")
    globals_ = _parse_entities_section(parsed.get("globals"), "globals")
    if not collections and not globals_:
        raise ConfigurationError("At least one collection or global must be configured.")
    localization = _parse_localization_section(parsed.get("localization"))
    return AdminConfiguration(
        path=path,
        collections=collections,
        globals=globals_,
        localization=localization,
    )


def _parse_entities_section(value: Any, section_name: str) -> dict[str, EntityConfig]:
    if value is None:
        return {}
    section = _require_mapping(value, section_name)
    entities: dict[str, EntityConfig] = {}
    for slug, definition in section.items():
        slug_text = _require_non_empty_string(slug, f"{section_name} slug")
        location = f"{section_name}.{slug_text}"
        entity_section = _require_mapping(definition, location)
        if section_name == "collections":
            identifier = EntityIdentifier(collection_slug=slug_text)
        else:
            identifier = EntityIdentifier(global_slug=slug_text)
        entities[slug_text] = EntityConfig(
            identifier=identifier,
            fields=_parse_fields(entity_section.get("fields"), f"{location}.fields"),
            label=_optional_string(entity_section.get("label"), f"{location}.label"),
        )
    return entities


def _parse_fields(value: Any, location: str) -> tuple[FieldNode, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{location} must be a list of field definitions.")
    return tuple(
        _parse_field(item, f"{location}[{index}]") for index, item in enumerate(value)
    )


def _parse_field(value: Any, location: str) -> FieldNode:
    section = _require_mapping(value, location)
    field_type = _require_non_empty_string(section.get("type"), f"{location}.type")
    label = _optional_string(section.get("label"), f"{location}.label")

    if field_type == "tabs":
        return TabsField(tabs=_parse_tabs(section.get("tabs"), f"{location}.tabs"))
    if field_type in LAYOUT_KINDS:
        return LayoutField(
            layout=field_type,
            fields=_parse_fields(section.get("fields"), f"{location}.fields"),
            label=label,
        )

    name = _require_field_name(section.get("name"), f"{location}.name")
    if field_type == "group":
        return GroupField(
            name=name,
            fields=_parse_fields(section.get("fields"), f"{location}.fields"),
            label=label,
        )
    if field_type == "array":
        return ArrayField(
            name=name,
            fields=_parse_fields(section.get("fields"), f"{location}.fields"),
            label=label,
        )
    if field_type == "blocks":
        return BlocksField(
            name=name,
            blocks=_parse_blocks(section.get("blocks"), f"{location}.blocks"),
            label=label,
        )
    if field_type in LEAF_FIELD_TYPES:
        return LeafField(
            name=name,
            field_type=field_type,
            label=label,
            required=_optional_bool(section.get("required"), f"{location}.required"),
            metadata={
                key: item for key, item in section.items() if key not in _LEAF_RESERVED_KEYS
            },
        )
    raise ConfigurationError(f"{location}.type '{field_type}' is not a supported field type.")


def _parse_tabs(value: Any, location: str) -> tuple[Tab, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence) or not value:
        raise ConfigurationError(f"{location} must be a non-empty list of tabs.")
    tabs: list[Tab] = []
    for index, item in enumerate(value):
        tab_location = f"{location}[{index}]"
        section = _require_mapping(item, tab_location)
        name = section.get("name")
        tabs.append(
            Tab(
                fields=_parse_fields(section.get("fields"), f"{tab_location}.fields"),
                name=None if name is None else _require_field_name(name, f"{tab_location}.name"),
                label=_optional_string(section.get("label"), f"{tab_location}.label"),
            )
        )
    return tuple(tabs)


def _parse_blocks(value: Any, location: str) -> tuple[Block, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence) or not value:
        raise ConfigurationError(f"{location} must be a non-empty list of blocks.")
    blocks: list[Block] = []
    seen_slugs: set[str] = set()
    for index, item in enumerate(value):
        block_location = f"{location}[{index}]"
        section = _require_mapping(item, block_location)
        slug = _require_field_name(section.get("slug"), f"{block_location}.slug")
        if slug in seen_slugs:
            raise ConfigurationError(f"{block_location}.slug '{slug}' is declared twice.")
        seen_slugs.add(slug)
        blocks.append(
            Block(
                slug=slug,
                fields=_parse_fields(section.get("fields"), f"{block_location}.fields"),
                label=_optional_string(section.get("label"), f"{block_location}.label"),
            )
        )
    return tuple(blocks)


def _parse_localization_section(value: Any) -> LocalizationSettings:
    if value is None:
        return LocalizationSettings(
            default_locale=DEFAULT_LOCALE, fallback_locale=None, translations={}
        )
    section = _require_mapping(value, "localization")
    default_locale = _require_non_empty_string(
        section.get("default_locale", DEFAULT_LOCALE), "localization.default_locale"
    )
    fallback_locale = _optional_string(
        section.get("fallback_locale"), "localization.fallback_locale"
    )
    translations_section = section.get("translations") or {}
    if not isinstance(translations_section, Mapping):
        raise ConfigurationError("localization.translations must be a mapping.")
    translations: dict[str, dict[str, str]] = {}
    for locale, catalog in translations_section.items():
        locale_text = _require_non_empty_string(locale, "localization.translations locale")
        catalog_section = _require_mapping(catalog, f"localization.translations.{locale_text}")
        translations[locale_text] = {
            str(key): _require_non_empty_string(
                text, f"localization.translations.{locale_text}.{key}"
            )
            for key, text in catalog_section.items()
        }
    return LocalizationSettings(
        default_locale=default_locale,
        fallback_locale=fallback_locale,
        translations=translations,
    )


def _require_field_name(value: Any, field_name: str) -> str:
    name = _require_non_empty_string(value, field_name)
    if "." in name or "*" in name:
        raise ConfigurationError(f"{field_name} '{name}' must not contain '.' or '*'.")
    return name


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
