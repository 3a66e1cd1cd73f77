"""Loader for the YAML-backed currency catalogue."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, CurrencyCatalogue, CurrencyEntry

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CATALOGUE_FILE = CONFIG_DIRECTORY / "currencies.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def parse_currency_catalogue(raw: dict[str, Any]) -> CurrencyCatalogue:
    """Validate a raw mapping into a :class:`CurrencyCatalogue`."""

    try:
        return CurrencyCatalogue.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Currency catalogue validation failed: {error}") from error


def read_currency_catalogue(path: Path) -> CurrencyCatalogue:
    """Read and validate the catalogue stored at ``path``."""

    if not path.exists():
        raise FileNotFoundError(f"Currency catalogue not found: {path}")

    return parse_currency_catalogue(_load_yaml(path))


@lru_cache(maxsize=1)
def load_currency_catalogue() -> CurrencyCatalogue:
    """Load and cache the packaged currency catalogue."""

    return read_currency_catalogue(CATALOGUE_FILE)


__all__ = [
    "CATALOGUE_FILE",
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "CurrencyCatalogue",
    "CurrencyEntry",
    "load_currency_catalogue",
    "parse_currency_catalogue",
    "read_currency_catalogue",
]
