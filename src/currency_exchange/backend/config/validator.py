"""Consistency checks for the currency catalogue beyond schema validation."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .catalogue import CATALOGUE_FILE, read_currency_catalogue
from .schema import ConfigurationError, CurrencyCatalogue


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_defaults(catalogue: CurrencyCatalogue) -> list[str]:
    errors: list[str] = []
    if catalogue.default_currency not in catalogue.currencies:
        errors.append(
            _format_scope(
                "default_currency",
                f"{catalogue.default_currency} is not a configured currency",
            )
        )
    return errors


def _validate_country_currencies(catalogue: CurrencyCatalogue) -> list[str]:
    errors: list[str] = []
    for country, code in catalogue.country_currencies.items():
        scope = f"country_currencies.{country}"
        if len(country) != 2 or not country.isalpha():
            errors.append(_format_scope(scope, "country keys must be two letters"))
        if code not in catalogue.currencies:
            errors.append(_format_scope(scope, f"{code} is not a configured currency"))
    return errors


def _validate_symbols(catalogue: CurrencyCatalogue) -> list[str]:
    errors: list[str] = []
    for code, entry in catalogue.currencies.items():
        if entry.symbol is not None and entry.symbol != entry.symbol.strip():
            errors.append(
                _format_scope(f"currencies.{code}.symbol", "symbols must not carry padding")
            )
    return errors


def validate_currency_catalogue(catalogue: CurrencyCatalogue) -> list[str]:
    """Return human-readable issues detected in ``catalogue``."""

    errors: list[str] = []
    errors.extend(_validate_defaults(catalogue))
    errors.extend(_validate_country_currencies(catalogue))
    errors.extend(_validate_symbols(catalogue))
    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the currency catalogue and report issues to contributors."
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=CATALOGUE_FILE,
        help="Catalogue file to validate (defaults to the packaged catalogue)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    path: Path = args.path

    try:
        catalogue = read_currency_catalogue(path)
    except (OSError, ConfigurationError) as error:
        print(f"[{path.name}] failed to load catalogue: {error}")
        return 1

    issues = validate_currency_catalogue(catalogue)
    if issues:
        print(f"[{path.name}] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"[{path.name}] OK ({len(catalogue.currencies)} currencies)")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
