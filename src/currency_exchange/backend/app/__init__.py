"""Application factory for the currency exchange backend."""

from __future__ import annotations

import logging
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from currency_exchange.backend.config import Settings
from currency_exchange.backend.version import get_project_version

from .currencies import SUPPORTED_CURRENCIES
from .http import init_state, problem_response
from .localization import DEFAULT_LOCALE
from .models import format_validation_error
from .routes import register_routes
from .services import RatesStore, RatesUnavailableError, UnknownCurrencyError

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    # ``app.logger`` is left unset and inherits this level like every module logger.
    logging.getLogger("currency_exchange").setLevel(settings.log_level)


def _build_rates_store(settings: Settings) -> RatesStore:
    store = RatesStore()
    if settings.rates_file is not None:
        try:
            store.load_file(settings.rates_file)
        except (OSError, ValueError) as error:
            logger.warning("Could not load rates snapshot %s: %s", settings.rates_file, error)
    return store


def create_app(settings: Settings | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    settings = settings or Settings.from_env()
    app = Flask(__name__)
    _configure_logging(settings)

    if not settings.allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "PUT"],
        allow_headers=["Authorization", "Content-Type"],
    )

    state = init_state(app, settings, _build_rates_store(settings))
    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        return jsonify(
            {
                "status": "ok",
                "version": get_project_version(),
                "currencies": len(SUPPORTED_CURRENCIES),
                "default_locale": DEFAULT_LOCALE,
                "rates_loaded": state.rates.is_loaded,
            }
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed requests."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Describe rejected payload fields."""

        return problem_response(
            "validation_error", status=400, message=format_validation_error(error)
        ).to_response()

    @app.errorhandler(UnknownCurrencyError)
    def handle_unknown_currency(error: UnknownCurrencyError):
        return problem_response(
            "unknown_currency", status=400, message=str(error), currency=error.code
        ).to_response()

    @app.errorhandler(RatesUnavailableError)
    def handle_rates_unavailable(error: RatesUnavailableError):
        return problem_response(
            "rates_unavailable", status=503, message=str(error)
        ).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface domain validation errors to clients."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app
