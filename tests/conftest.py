"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from currency_exchange.backend.app import create_app  # noqa: E402
from currency_exchange.backend.app.models import RatesResponse  # noqa: E402
from currency_exchange.backend.config import Settings  # noqa: E402

PUBLISH_TOKEN = "test-publish-token"


@pytest.fixture()
def settings() -> Settings:
    """Settings independent of the developer's environment."""

    return Settings(allowed_origins=("https://allowed.test",), publish_token=PUBLISH_TOKEN)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(settings)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def publish_headers() -> dict[str, str]:
    """Authorization header accepted by the rates publishing endpoint."""

    return {"Authorization": f"Bearer {PUBLISH_TOKEN}"}


@pytest.fixture()
def myr_rates() -> RatesResponse:
    """A small snapshot quoted against the Malaysian ringgit."""

    return RatesResponse(
        date="2025-01-15",
        base="MYR",
        rates={"USD": 0.25, "EUR": 0.2, "JPY": 35.0},
    )
