"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping

from flask import Flask, current_app, jsonify

from currency_exchange.backend.app.services import RatesStore
from currency_exchange.backend.config import Settings

EXTENSION_KEY = "currency_exchange"


@dataclass(frozen=True)
class ProblemResponse:
    """Error payload returned by every API endpoint."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Return the serialisable payload for this problem response."""

        payload: dict[str, Any] = {"error": self.error}
        payload["message"] = self.message or HTTPStatus(self.status).phrase
        payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem payload into a Flask response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Convenience factory mirroring Flask's ``jsonify`` interface."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra)


@dataclass(frozen=True)
class AppState:
    """Per-application collaborators registered on ``app.extensions``."""

    settings: Settings
    rates: RatesStore


def init_state(app: Flask, settings: Settings, rates: RatesStore) -> AppState:
    state = AppState(settings=settings, rates=rates)
    app.extensions[EXTENSION_KEY] = state
    return state


def get_state() -> AppState:
    """Return the collaborators of the application handling the request."""

    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "AppState",
    "EXTENSION_KEY",
    "ProblemResponse",
    "get_state",
    "init_state",
    "problem_response",
]
