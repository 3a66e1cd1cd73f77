"""Typed records exchanged with the converter client.

The rates snapshot, conversion result and history item mirror the shapes the
browser client already consumes; they are frozen so a snapshot handed to a
request can never change underneath it.
"""

from .api import (
    ApiModel,
    ConversionQuery,
    ConversionResult,
    CurrencyInfo,
    HistoryItem,
    RatesResponse,
    format_validation_error,
)

__all__ = [
    "ApiModel",
    "ConversionQuery",
    "ConversionResult",
    "CurrencyInfo",
    "HistoryItem",
    "RatesResponse",
    "format_validation_error",
]
