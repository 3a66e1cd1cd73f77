"""Cross-rate conversion over a published rates snapshot."""

from __future__ import annotations

from currency_exchange.backend.app.models import (
    ConversionQuery,
    ConversionResult,
    RatesResponse,
)


class UnknownCurrencyError(ValueError):
    """Raised when a conversion references a currency the snapshot lacks."""

    def __init__(self, role: str, code: str) -> None:
        super().__init__(f"Unknown {role} currency: {code}")
        self.role = role
        self.code = code


def _rate_for(rates: RatesResponse, code: str) -> float:
    if code == rates.base:
        return 1.0
    return rates.rates[code]


def convert_amount(
    amount: float,
    from_currency: str,
    to_currency: str,
    rates: RatesResponse,
) -> float:
    """Convert ``amount`` between two currencies quoted against ``rates.base``.

    Rates are expressed as units of each currency per one unit of the base, so
    the amount is first taken back to the base and then out to the target.
    """

    if not rates.quotes(from_currency):
        raise UnknownCurrencyError("source", from_currency)
    if not rates.quotes(to_currency):
        raise UnknownCurrencyError("target", to_currency)

    if from_currency == to_currency:
        return amount
    if from_currency == rates.base:
        return amount * _rate_for(rates, to_currency)
    if to_currency == rates.base:
        return amount / _rate_for(rates, from_currency)
    return amount * _rate_for(rates, to_currency) / _rate_for(rates, from_currency)


def convert(query: ConversionQuery, rates: RatesResponse) -> ConversionResult:
    """Run ``query`` against ``rates`` and stamp the result with the quote date."""

    result = convert_amount(query.amount, query.from_currency, query.to_currency, rates)
    return ConversionResult(
        from_currency=query.from_currency,
        amount=query.amount,
        to_currency=query.to_currency,
        result=result,
        date=rates.date,
    )


__all__ = ["UnknownCurrencyError", "convert", "convert_amount"]
