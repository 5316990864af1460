"""Localization exports."""

from .label_resolution import (
    CatalogTranslator,
    LocalizationContext,
    MissingLocalization,
    Translator,
    resolve_label,
)

__all__ = [
    "CatalogTranslator",
    "LocalizationContext",
    "MissingLocalization",
    "Translator",
    "resolve_label",
]
