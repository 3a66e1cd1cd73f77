"""UI label catalogues backed by the packaged JSON resources."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "currency_exchange.translations"


class CatalogueError(ValueError):
    """Raised when a translation catalogue is malformed or out of step."""


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized labels."""

    locale: str
    _messages: Mapping[str, str]
    _fallback: Mapping[str, str]

    def __call__(self, key: str) -> str:
        return self._messages.get(key) or self._fallback.get(key, key)


def _read_locale_file(resource: Any) -> dict[str, str]:
    with resource.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise CatalogueError(f"{resource.name} must contain a JSON object")

    messages: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise CatalogueError(f"{resource.name}: label {key!r} must be a string")
        messages[key] = value
    return messages


def check_parity(catalogues: Mapping[str, Mapping[str, str]]) -> None:
    """Ensure every locale defines exactly the keys of the default locale."""

    if DEFAULT_LOCALE not in catalogues:
        raise CatalogueError(f"Missing catalogue for default locale {DEFAULT_LOCALE!r}")

    expected = set(catalogues[DEFAULT_LOCALE])
    problems: list[str] = []
    for locale, messages in sorted(catalogues.items()):
        keys = set(messages)
        missing = sorted(expected - keys)
        extra = sorted(keys - expected)
        if missing:
            problems.append(f"{locale} is missing {', '.join(missing)}")
        if extra:
            problems.append(f"{locale} defines unknown {', '.join(extra)}")

    if problems:
        raise CatalogueError("Translation catalogues out of step: " + "; ".join(problems))


@cache
def _load_languages() -> Mapping[str, Mapping[str, str]]:
    """Read, validate and freeze every packaged locale catalogue."""

    root = resources.files(_TRANSLATIONS_PACKAGE)
    catalogues = {
        entry.name.removesuffix(".json"): _read_locale_file(entry)
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    }
    check_parity(catalogues)

    return MappingProxyType(
        {locale: MappingProxyType(catalogues[locale]) for locale in sorted(catalogues)}
    )


LANGUAGES: Mapping[str, Mapping[str, str]] = _load_languages()


def available_locales() -> tuple[str, ...]:
    """Return the locales with published catalogues."""

    return tuple(LANGUAGES)


def normalise_locale(locale: str | None) -> str:
    """Normalise requested locale to a supported catalogue key."""

    if not locale:
        return DEFAULT_LOCALE

    normalized = locale.strip().lower().replace("_", "-").split("-")[0]
    return normalized if normalized in LANGUAGES else DEFAULT_LOCALE


def get_language(locale: str | None = None) -> Mapping[str, str]:
    """Return the label table for ``locale``, falling back to the default."""

    return LANGUAGES[normalise_locale(locale)]


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator instance for the requested locale."""

    normalized = normalise_locale(locale)
    return Translator(
        locale=normalized,
        _messages=LANGUAGES[normalized],
        _fallback=LANGUAGES[DEFAULT_LOCALE],
    )


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose the resolved catalogue and its fallback for API consumers."""

    normalized = normalise_locale(locale)

    return {
        "locale": normalized,
        "default_locale": DEFAULT_LOCALE,
        "available_locales": list(available_locales()),
        "messages": dict(LANGUAGES[normalized]),
        "fallback": {
            "locale": DEFAULT_LOCALE,
            "messages": dict(LANGUAGES[DEFAULT_LOCALE]),
        },
    }


__all__ = [
    "CatalogueError",
    "DEFAULT_LOCALE",
    "LANGUAGES",
    "Translator",
    "available_locales",
    "check_parity",
    "get_language",
    "get_translator",
    "load_translations",
    "normalise_locale",
]
