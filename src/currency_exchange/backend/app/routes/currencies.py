"""Expose currency display metadata and formatting to front-end consumers."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from currency_exchange.backend.app.currencies import (
    DEFAULT_FLAG_SIZE,
    DEFAULT_FLAG_STYLE,
    currency_for_country,
    describe_currency,
    format_currency,
    supported_currencies,
)
from currency_exchange.backend.app.http import get_state
from currency_exchange.backend.app.services import parse_amount, resolve_format_locale

blueprint = Blueprint("currencies", __name__, url_prefix="/api/v1")

SUGGESTED_TARGET = "USD"
RATES_NOT_LOADED = "Rates not loaded"


def _flag_options() -> tuple[str, str | int]:
    style = request.args.get("style") or DEFAULT_FLAG_STYLE
    size = request.args.get("size") or DEFAULT_FLAG_SIZE
    return style, size


@blueprint.get("/currencies")
def list_currencies() -> tuple[Any, int]:
    """Return display metadata for every supported currency."""

    style, size = _flag_options()
    payload = [describe_currency(code, style, size).as_payload() for code in supported_currencies()]
    return jsonify({"currencies": payload}), 200


@blueprint.get("/currencies/<code>")
def get_currency(code: str) -> tuple[Any, int]:
    """Return metadata for ``code``; unknown codes carry their fallbacks."""

    style, size = _flag_options()
    return jsonify(describe_currency(code, style, size).as_payload()), 200


@blueprint.get("/currencies/<code>/format")
def format_amount_for_currency(code: str) -> tuple[Any, int]:
    """Format the ``amount`` query parameter in ``code`` for the caller's locale."""

    amount = parse_amount(request)
    locale = resolve_format_locale(request, get_state().settings.default_format_locale)
    return (
        jsonify(
            {
                "currency": code,
                "amount": amount,
                "locale": locale,
                "formatted": format_currency(amount, code, locale),
            }
        ),
        200,
    )


@blueprint.get("/detect-currency")
def detect_currency() -> tuple[Any, int]:
    """Suggest a source currency for the visitor's ``country`` code."""

    country = (request.args.get("country") or "").strip().upper()
    detected = currency_for_country(country)
    snapshot = get_state().rates.peek()

    payload: dict[str, Any] = {
        "country": country or None,
        "detected_currency": detected,
        "available": snapshot is not None and snapshot.quotes(detected),
        "suggested_target": SUGGESTED_TARGET,
    }
    if snapshot is None:
        payload["error"] = RATES_NOT_LOADED
    else:
        payload["all_currencies"] = sorted(snapshot.rates)
    return jsonify(payload), 200
