"""Service-layer helpers for the currency exchange backend."""

from .conversion_service import UnknownCurrencyError, convert, convert_amount
from .rates_store import RatesStore, RatesUnavailableError
from .request_parser import (
    parse_amount,
    parse_json_object,
    resolve_format_locale,
    resolve_ui_locale,
)

__all__ = [
    "RatesStore",
    "RatesUnavailableError",
    "UnknownCurrencyError",
    "convert",
    "convert_amount",
    "parse_amount",
    "parse_json_object",
    "resolve_format_locale",
    "resolve_ui_locale",
]
