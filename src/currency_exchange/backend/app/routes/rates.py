"""Rates snapshot publication and conversion endpoints."""

from __future__ import annotations

import hmac
from typing import Any

from flask import Blueprint, jsonify, request

from currency_exchange.backend.app.http import get_state, problem_response
from currency_exchange.backend.app.models import ConversionQuery, RatesResponse
from currency_exchange.backend.app.services import convert, parse_json_object

blueprint = Blueprint("rates", __name__, url_prefix="/api/v1")


def _bearer_token() -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _reject_unauthorised_publisher() -> tuple[Any, int] | None:
    """Return a problem response unless the caller presents the publish token."""

    expected = get_state().settings.publish_token
    if expected is None:
        return problem_response(
            "publishing_disabled",
            status=403,
            message="Rates publishing is not enabled on this server",
        ).to_response()

    token = _bearer_token()
    if token is None or not hmac.compare_digest(
        token.encode("utf-8"), expected.get_secret_value().encode("utf-8")
    ):
        response, status = problem_response(
            "unauthorized", status=401, message="A valid publish token is required"
        ).to_response()
        response.headers["WWW-Authenticate"] = "Bearer"
        return response, status
    return None


@blueprint.get("/rates")
def get_rates() -> tuple[Any, int]:
    """Return the current snapshot (503 until one is published)."""

    return jsonify(get_state().rates.current().as_payload()), 200


@blueprint.put("/rates")
def publish_rates() -> tuple[Any, int]:
    """Replace the current snapshot with the JSON body (bearer token required)."""

    rejected = _reject_unauthorised_publisher()
    if rejected is not None:
        return rejected

    snapshot = RatesResponse.model_validate(parse_json_object(request))
    stored = get_state().rates.publish(snapshot)
    return jsonify(stored.as_payload()), 200


@blueprint.get("/convert")
def convert_currency() -> tuple[Any, int]:
    """Convert ``amount`` from one currency to another using the snapshot."""

    rates = get_state().rates.current()
    query = ConversionQuery.model_validate(
        {
            "amount": request.args.get("amount"),
            "from": request.args.get("from"),
            "to": request.args.get("to"),
        }
    )
    return jsonify(convert(query, rates).as_payload()), 200
