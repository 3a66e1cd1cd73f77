"""Shared translation helpers bridging backend services and static catalogues."""

from .catalog import (
    DEFAULT_LOCALE,
    LANGUAGES,
    CatalogueError,
    Translator,
    available_locales,
    get_language,
    get_translator,
    load_translations,
    normalise_locale,
)

__all__ = [
    "CatalogueError",
    "DEFAULT_LOCALE",
    "LANGUAGES",
    "Translator",
    "available_locales",
    "get_language",
    "get_translator",
    "load_translations",
    "normalise_locale",
]
