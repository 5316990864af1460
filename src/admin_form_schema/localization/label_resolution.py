"""Translation lookup and label resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class MissingLocalization(LookupError):
    """Raised when a translation key has no entry for the requested locale."""

    def __init__(self, key: str, locale: str) -> None:
        super().__init__(f"No translation for '{key}' in locale '{locale}'.")
        self.key = key
        self.locale = locale


class Translator(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for translation backends."""

    def resolve(self, key: str, locale: str) -> str: ...


class CatalogTranslator:  # pylint: disable=too-few-public-methods
    """Translator backed by in-memory catalogs keyed by locale."""

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]],
        *,
        fallback_locale: str | None = None,
    ) -> None:
        self._catalogs = {locale: dict(entries) for locale, entries in catalogs.items()}
        self._fallback_locale = fallback_locale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogTranslator):
            return NotImplemented
        return (
            self._catalogs == other._catalogs and self._fallback_locale == other._fallback_locale
        )

    def __hash__(self) -> int:
        return hash((self._fallback_locale, tuple(sorted(self._catalogs))))

    def resolve(self, key: str, locale: str) -> str:
        for candidate in (locale, self._fallback_locale):
            if candidate is None:
                continue
            value = self._catalogs.get(candidate, {}).get(key)
            if value:
                return value
        raise MissingLocalization(key, locale)


@dataclass(frozen=True)
class LocalizationContext:
    """Translator plus the locale labels are rendered in."""

    translator: Translator
    locale: str


def resolve_label(name: str, label: str | None, localization: LocalizationContext) -> str:
    """Translate a field label, falling back to the raw label or field name."""
    key = label or name
    try:
        return localization.translator.resolve(key, localization.locale)
    except MissingLocalization:
        _LOGGER.debug("No %s translation for '%s'; using raw text.", localization.locale, key)
        return key
