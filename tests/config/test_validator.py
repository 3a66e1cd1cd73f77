from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from currency_exchange.backend.config import ConfigurationError, load_currency_catalogue
from currency_exchange.backend.config.catalogue import parse_currency_catalogue
from currency_exchange.backend.config.validator import main, validate_currency_catalogue


def test_packaged_catalogue_is_valid() -> None:
    assert validate_currency_catalogue(load_currency_catalogue()) == []


def test_validator_flags_unknown_country_currency() -> None:
    catalogue = load_currency_catalogue()
    broken = catalogue.model_copy(
        update={"country_currencies": {**catalogue.country_currencies, "PL": "PLN"}}
    )

    errors = validate_currency_catalogue(broken)

    assert errors == ["country_currencies.PL: PLN is not a configured currency"]


def test_validator_flags_unknown_default_currency() -> None:
    broken = load_currency_catalogue().model_copy(update={"default_currency": "XYZ"})

    errors = validate_currency_catalogue(broken)

    assert any(error.startswith("default_currency") for error in errors)


@pytest.mark.parametrize(
    "currencies",
    [
        {"usd": {"name": "US Dollar", "region": "US"}},
        {"USD": {"name": "US Dollar", "region": "usa"}},
        {"USD": {"name": " ", "region": "US"}},
        {"USD": {"name": "US Dollar", "symbol": "", "region": "US"}},
        {"USD": {"name": "US Dollar", "region": "US", "iso": 840}},
        {},
    ],
)
def test_schema_rejects_malformed_entries(currencies: dict) -> None:
    with pytest.raises(ConfigurationError):
        parse_currency_catalogue({"currencies": currencies})


def test_main_reports_success_for_packaged_catalogue(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "OK (28 currencies)" in capsys.readouterr().out


def test_main_reports_issues(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "currencies.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "default_currency": "USD",
                "currencies": {"EUR": {"name": "Euro", "region": "EU"}},
                "country_currencies": {"DE": "EUR"},
            }
        ),
        encoding="utf-8",
    )

    assert main([str(path)]) == 1
    assert "default_currency: USD is not a configured currency" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "absent.yaml")]) == 1
    assert "failed to load catalogue" in capsys.readouterr().out
