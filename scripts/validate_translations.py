#!/usr/bin/env python3
"""Validate UI translation catalogues before they ship to the client."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
TRANSLATIONS_DIR = REPO_ROOT / "src" / "currency_exchange" / "translations"
BASE_LOCALE = "en"
REQUIRED_KEYS = frozenset({"name"})


class ValidationError(Exception):
    """Raised when validation detects unrecoverable issues."""


def _load_catalogues(directory: Path) -> dict[str, dict[str, object]]:
    if not directory.is_dir():
        raise ValidationError(f"Missing translations directory: {directory}")

    catalogues: dict[str, dict[str, object]] = {}
    for path in sorted(directory.glob("*.json")):
        with path.open("r", encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as error:
                raise ValidationError(f"{path.name} is not valid JSON: {error}") from error
        if not isinstance(payload, dict):
            raise ValidationError(f"Unexpected payload format in {path.name}")
        catalogues[path.stem] = payload

    if not catalogues:
        raise ValidationError("No translation catalogues discovered")
    if BASE_LOCALE not in catalogues:
        raise ValidationError(f"Base locale catalogue {BASE_LOCALE}.json is missing")
    return catalogues


def _value_issues(locale: str, catalogue: dict[str, object]) -> list[str]:
    issues: list[str] = []
    for key, value in sorted(catalogue.items()):
        if not isinstance(value, str):
            issues.append(f"{locale}.{key}: expected a string, found {type(value).__name__}")
        elif not value.strip():
            issues.append(f"{locale}.{key}: empty label")
    return issues


def _parity_issues(catalogues: dict[str, dict[str, object]]) -> list[str]:
    issues: list[str] = []
    expected = set(catalogues[BASE_LOCALE])
    for missing in sorted(REQUIRED_KEYS - expected):
        issues.append(f"{BASE_LOCALE}: required key {missing!r} is missing")

    for locale, catalogue in sorted(catalogues.items()):
        if locale == BASE_LOCALE:
            continue
        keys = set(catalogue)
        for key in sorted(expected - keys):
            issues.append(f"{locale}: missing key {key!r}")
        for key in sorted(keys - expected):
            issues.append(f"{locale}: key {key!r} is not defined for {BASE_LOCALE}")
    return issues


def collect_issues(directory: Path = TRANSLATIONS_DIR) -> list[str]:
    """Return every problem found in the catalogues under ``directory``."""

    catalogues = _load_catalogues(directory)
    issues = _parity_issues(catalogues)
    for locale, catalogue in sorted(catalogues.items()):
        issues.extend(_value_issues(locale, catalogue))
    return issues


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--translations-dir",
        type=Path,
        default=TRANSLATIONS_DIR,
        help="Directory holding <locale>.json catalogues",
    )
    args = parser.parse_args(argv)

    try:
        issues = collect_issues(args.translations_dir)
    except ValidationError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if issues:
        print(f"{len(issues)} translation issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print("Translations OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
