"""Currency metadata lookups backed by the packaged currency catalogue.

Every lookup is total: unknown codes resolve to a documented fallback (the code
itself, or the default flag region) instead of raising.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from currency_exchange.backend.config import load_currency_catalogue

FLAG_URL_TEMPLATE = "https://flagsapi.com/{region}/{style}/{size}.png"
DEFAULT_FLAG_STYLE = "flat"
DEFAULT_FLAG_SIZE = 64

_CATALOGUE = load_currency_catalogue()

DEFAULT_REGION: str = _CATALOGUE.default_region
DEFAULT_CURRENCY: str = _CATALOGUE.default_currency

CURRENCY_NAMES: Mapping[str, str] = MappingProxyType(
    {code: entry.name for code, entry in _CATALOGUE.currencies.items()}
)
CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        code: entry.symbol
        for code, entry in _CATALOGUE.currencies.items()
        if entry.symbol is not None
    }
)
CURRENCY_REGIONS: Mapping[str, str] = MappingProxyType(
    {code: entry.region for code, entry in _CATALOGUE.currencies.items()}
)
COUNTRY_CURRENCIES: Mapping[str, str] = _CATALOGUE.country_currencies
SUPPORTED_CURRENCIES: frozenset[str] = frozenset(_CATALOGUE.codes)


def get_currency_name(code: str) -> str:
    """Return the display name for ``code``, or ``code`` when unknown."""

    return CURRENCY_NAMES.get(code, code)


def get_country_code(code: str) -> str:
    """Return the flag region for ``code``, or :data:`DEFAULT_REGION`."""

    return CURRENCY_REGIONS.get(code, DEFAULT_REGION)


def get_currency_symbol(code: str) -> str:
    """Return the symbol for ``code``, or ``code`` when none is configured."""

    return CURRENCY_SYMBOLS.get(code, code)


def get_flag_url(
    code: str,
    style: str = DEFAULT_FLAG_STYLE,
    size: int | str = DEFAULT_FLAG_SIZE,
) -> str:
    """Build the flag image URL for ``code``.

    ``style`` and ``size`` are passed through untouched; callers are expected to
    supply values the image service understands (``flat``/``shiny`` and
    16, 24, 32, 48 or 64).
    """

    return FLAG_URL_TEMPLATE.format(region=get_country_code(code), style=style, size=size)


def is_valid_currency(code: Any) -> bool:
    """Return ``True`` when ``code`` is allow-listed, ignoring case."""

    if not isinstance(code, str):
        return False
    return code.upper() in SUPPORTED_CURRENCIES


def currency_for_country(country_code: str | None) -> str:
    """Suggest a currency for a visitor's two-letter country code."""

    if not country_code:
        return DEFAULT_CURRENCY
    return COUNTRY_CURRENCIES.get(country_code.strip().upper(), DEFAULT_CURRENCY)


def supported_currencies() -> tuple[str, ...]:
    """Return the allow-listed codes in catalogue order."""

    return _CATALOGUE.codes


__all__ = [
    "COUNTRY_CURRENCIES",
    "CURRENCY_NAMES",
    "CURRENCY_REGIONS",
    "CURRENCY_SYMBOLS",
    "DEFAULT_CURRENCY",
    "DEFAULT_FLAG_SIZE",
    "DEFAULT_FLAG_STYLE",
    "DEFAULT_REGION",
    "FLAG_URL_TEMPLATE",
    "SUPPORTED_CURRENCIES",
    "currency_for_country",
    "get_country_code",
    "get_currency_name",
    "get_currency_symbol",
    "get_flag_url",
    "is_valid_currency",
    "supported_currencies",
]
