"""Configuration loading for currency tables and runtime settings."""

from .catalogue import load_currency_catalogue
from .schema import ConfigurationError, CurrencyCatalogue, CurrencyEntry
from .settings import Settings

__all__ = [
    "ConfigurationError",
    "CurrencyCatalogue",
    "CurrencyEntry",
    "Settings",
    "load_currency_catalogue",
]
