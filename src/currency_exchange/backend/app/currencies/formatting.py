"""Locale-aware currency formatting built on Babel's CLDR data."""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, format_decimal
from babel.numbers import format_currency as _babel_format_currency

logger = logging.getLogger(__name__)

DEFAULT_FORMAT_LOCALE = "en-US"
_FALLBACK_LOCALE = "en_US"
_TWO_DECIMAL_PATTERN = "#,##0.00"
_WELL_FORMED_CODE = re.compile(r"^[A-Za-z]{3}$")
_CENT = Decimal("0.01")

_FORMATTING_ERRORS = (ValueError, ArithmeticError, UnknownCurrencyError, UnknownLocaleError)

Amount = int | float | Decimal


@lru_cache(maxsize=64)
def resolve_locale(locale: str | None) -> Locale:
    """Parse a BCP 47 style tag (``en-US`` or ``en_US``) into a Babel locale.

    Unknown or malformed tags resolve to ``en_US``.
    """

    if locale:
        try:
            return Locale.parse(locale.strip().replace("-", "_"))
        except (ValueError, TypeError, UnknownLocaleError):
            logger.debug("Unsupported formatting locale %r; using %s", locale, _FALLBACK_LOCALE)
    return Locale.parse(_FALLBACK_LOCALE)


def _decimal_context(value: Decimal):
    context = getcontext().copy()
    context.prec = max(context.prec, value.adjusted() + 3)
    return localcontext(context)


def _to_cents(amount: Amount) -> Decimal:
    """Round ``amount`` to cents with halves away from zero.

    Floats are read through their shortest repr, so ``0.125`` becomes ``0.13``
    and ``2.675`` becomes ``2.68``.
    """

    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    with _decimal_context(value):
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Amount, locale: str | None = DEFAULT_FORMAT_LOCALE) -> str:
    """Format ``amount`` as a plain grouped number with two fraction digits."""

    cents = _to_cents(amount)
    with _decimal_context(cents):
        return format_decimal(cents, format=_TWO_DECIMAL_PATTERN, locale=resolve_locale(locale))


def _format_with_currency(amount: Amount, code: str, locale: Locale) -> str:
    if not _WELL_FORMED_CODE.match(code):
        raise ValueError(f"Malformed currency code: {code!r}")

    cents = _to_cents(amount)
    with _decimal_context(cents):
        return _babel_format_currency(
            cents,
            code.upper(),
            locale=locale,
            currency_digits=False,
        )


def format_currency(
    amount: Amount,
    code: str,
    locale: str | None = DEFAULT_FORMAT_LOCALE,
) -> str:
    """Format ``amount`` in ``code`` for ``locale`` with two fraction digits.

    Codes the formatter rejects are rendered as ``"{code} {amount}"`` with the
    amount still grouped for the locale; this function does not raise for
    numeric amounts.
    """

    resolved = resolve_locale(locale)
    try:
        return _format_with_currency(amount, code, resolved)
    except _FORMATTING_ERRORS as error:
        logger.debug("Falling back to plain formatting for %r: %s", code, error)

    try:
        number = format_amount(amount, locale)
    except _FORMATTING_ERRORS:
        number = f"{amount:.2f}"
    return f"{code} {number}"


__all__ = ["DEFAULT_FORMAT_LOCALE", "format_amount", "format_currency", "resolve_locale"]
