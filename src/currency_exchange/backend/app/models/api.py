"""Pydantic models describing the public API surface."""

from __future__ import annotations

import datetime
import math
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

__all__ = [
    "ApiModel",
    "RatesResponse",
    "ConversionQuery",
    "ConversionResult",
    "HistoryItem",
    "CurrencyInfo",
    "format_validation_error",
]


def _normalise_code(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


class ApiModel(BaseModel):
    """Frozen base model whose JSON form uses the client's field names."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def as_payload(self) -> dict[str, Any]:
        """Return the JSON-ready representation using field aliases."""

        return self.model_dump(mode="json", by_alias=True)


class RatesResponse(ApiModel):
    """Exchange-rate snapshot as published by the upstream rates API."""

    date: str
    base: str
    rates: Mapping[str, float]

    @field_validator("date")
    @classmethod
    def _require_iso_date(cls, value: str) -> str:
        try:
            datetime.date.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"date must be an ISO 8601 date, got {value!r}") from exc
        return value

    @field_validator("base", mode="before")
    @classmethod
    def _normalise_base(cls, value: Any) -> Any:
        return _normalise_code(value)

    @field_validator("rates", mode="before")
    @classmethod
    def _normalise_rate_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {_normalise_code(code): rate for code, rate in value.items()}

    @field_validator("rates")
    @classmethod
    def _require_positive_rates(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        for code, rate in value.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"rate for {code} must be a positive number")
        return MappingProxyType(dict(value))

    @field_serializer("rates")
    def _dump_rates(self, rates: Mapping[str, float]) -> dict[str, float]:
        return dict(rates)

    def with_base_rate(self) -> RatesResponse:
        """Return a copy whose ``rates`` also quote the base currency at 1.0."""

        return type(self)(date=self.date, base=self.base, rates={**self.rates, self.base: 1.0})

    def quotes(self, code: str) -> bool:
        """Return ``True`` when ``code`` can be converted with this snapshot."""

        return code == self.base or code in self.rates


class ConversionQuery(ApiModel):
    """Amount and currency pair requested by the client."""

    amount: float = Field(allow_inf_nan=False)
    from_currency: str = Field(alias="from", min_length=1)
    to_currency: str = Field(alias="to", min_length=1)

    @field_validator("from_currency", "to_currency", mode="before")
    @classmethod
    def _normalise_codes(cls, value: Any) -> Any:
        return _normalise_code(value)


class ConversionResult(ApiModel):
    """Computed conversion, stamped with the date of the rates used."""

    from_currency: str = Field(alias="from")
    amount: float
    to_currency: str = Field(alias="to")
    result: float
    date: str


class HistoryItem(ApiModel):
    """A past conversion as kept in the client's history list."""

    id: str
    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    amount: float
    result: float
    timestamp: int

    @classmethod
    def from_result(
        cls,
        result: ConversionResult,
        *,
        item_id: str | None = None,
        timestamp: int | None = None,
    ) -> HistoryItem:
        """Record ``result``; ``timestamp`` defaults to now in epoch milliseconds."""

        return cls(
            id=item_id or uuid4().hex,
            from_currency=result.from_currency,
            to_currency=result.to_currency,
            amount=result.amount,
            result=result.result,
            timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
        )


class CurrencyInfo(ApiModel):
    """Display metadata for one currency code."""

    code: str
    name: str
    symbol: str
    region: str
    flag_url: str
    valid: bool
    fallback_label: str


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid request: {details}"
