"""Currency display helpers shared by the API and server-side rendering."""

from currency_exchange.backend.app.models import CurrencyInfo

from .flags import FallbackBadge, flag_fallback_label, handle_flag_error
from .formatting import DEFAULT_FORMAT_LOCALE, format_amount, format_currency
from .metadata import (
    DEFAULT_FLAG_SIZE,
    DEFAULT_FLAG_STYLE,
    DEFAULT_REGION,
    SUPPORTED_CURRENCIES,
    currency_for_country,
    get_country_code,
    get_currency_name,
    get_currency_symbol,
    get_flag_url,
    is_valid_currency,
    supported_currencies,
)


def describe_currency(
    code: str,
    style: str = DEFAULT_FLAG_STYLE,
    size: int | str = DEFAULT_FLAG_SIZE,
) -> CurrencyInfo:
    """Bundle every display attribute of ``code`` into a single record."""

    return CurrencyInfo(
        code=code,
        name=get_currency_name(code),
        symbol=get_currency_symbol(code),
        region=get_country_code(code),
        flag_url=get_flag_url(code, style, size),
        valid=is_valid_currency(code),
        fallback_label=flag_fallback_label(code),
    )


__all__ = [
    "DEFAULT_FLAG_SIZE",
    "DEFAULT_FLAG_STYLE",
    "DEFAULT_FORMAT_LOCALE",
    "DEFAULT_REGION",
    "FallbackBadge",
    "SUPPORTED_CURRENCIES",
    "currency_for_country",
    "describe_currency",
    "flag_fallback_label",
    "format_amount",
    "format_currency",
    "get_country_code",
    "get_currency_name",
    "get_currency_symbol",
    "get_flag_url",
    "handle_flag_error",
    "is_valid_currency",
    "supported_currencies",
]
