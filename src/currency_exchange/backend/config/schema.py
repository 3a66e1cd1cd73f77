"""Pydantic models describing the currency catalogue configuration."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")
REGION_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _require_region(value: str) -> str:
    if not REGION_CODE_PATTERN.match(value):
        raise ConfigurationError(
            f"Region codes must be two uppercase letters, got {value!r}"
        )
    return value


class CurrencyEntry(ImmutableModel):
    """Display metadata for a single supported currency."""

    name: str
    symbol: str | None = None
    region: str

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ConfigurationError("Currency names must not be blank")
        return value

    @field_validator("symbol")
    @classmethod
    def _reject_blank_symbol(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ConfigurationError("Currency symbols must be omitted rather than blank")
        return value

    @field_validator("region")
    @classmethod
    def _validate_region(cls, value: str) -> str:
        return _require_region(value)


class CurrencyCatalogue(ImmutableModel):
    """Complete set of currency tables consumed by the lookup helpers."""

    default_region: str = "EU"
    default_currency: str = "USD"
    currencies: Mapping[str, CurrencyEntry]
    country_currencies: Mapping[str, str] = {}

    @field_validator("currencies", mode="before")
    @classmethod
    def _coerce_currency_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ConfigurationError("The currency table must be a mapping keyed by code")
        for code in value:
            if not isinstance(code, str) or not CURRENCY_CODE_PATTERN.match(code):
                raise ConfigurationError(
                    f"Currency codes must be three uppercase letters, got {code!r}"
                )
        return value

    @field_validator("country_currencies", mode="before")
    @classmethod
    def _coerce_country_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("Country currencies must be a mapping")
        return {str(country).upper(): str(code).upper() for country, code in value.items()}

    @field_validator("default_region")
    @classmethod
    def _validate_default_region(cls, value: str) -> str:
        return _require_region(value)

    @model_validator(mode="after")
    def _freeze_tables(self) -> CurrencyCatalogue:
        if not self.currencies:
            raise ConfigurationError("At least one currency must be configured")
        object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))
        object.__setattr__(
            self, "country_currencies", MappingProxyType(dict(self.country_currencies))
        )
        return self

    @property
    def codes(self) -> tuple[str, ...]:
        """Return the allow-listed currency codes in declaration order."""

        return tuple(self.currencies)


__all__ = [
    "CURRENCY_CODE_PATTERN",
    "REGION_CODE_PATTERN",
    "ConfigurationError",
    "CurrencyCatalogue",
    "CurrencyEntry",
    "ImmutableModel",
]
