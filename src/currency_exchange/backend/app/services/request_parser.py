"""Helpers for normalising incoming API requests."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from currency_exchange.backend.app.localization import normalise_locale


def resolve_format_locale(req: Request, default: str) -> str:
    """Pick the number-formatting locale from ``locale`` or ``Accept-Language``."""

    locale_param = (req.args.get("locale") or "").strip()
    if locale_param:
        return locale_param

    accept_language = req.headers.get("Accept-Language")
    if accept_language:
        primary = accept_language.split(",")[0].split(";")[0].strip()
        if primary and primary != "*":
            return primary

    return default


def resolve_ui_locale(req: Request, hint: str | None = None) -> str:
    """Resolve the catalogue locale from an explicit hint or the request."""

    if hint and hint.strip():
        return normalise_locale(hint)
    return normalise_locale(resolve_format_locale(req, ""))


def parse_amount(req: Request) -> float:
    """Read the required ``amount`` query parameter as a finite number."""

    raw = req.args.get("amount")
    if raw is None or not raw.strip():
        raise BadRequest("Query parameter 'amount' is required")
    try:
        amount = float(raw)
    except ValueError as exc:
        raise BadRequest(f"Query parameter 'amount' must be numeric, got {raw!r}") from exc
    if not math.isfinite(amount):
        raise BadRequest("Query parameter 'amount' must be finite")
    return amount


def parse_json_object(req: Request) -> dict[str, Any]:
    """Extract a JSON object payload from ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")
    return dict(data)


__all__ = [
    "parse_amount",
    "parse_json_object",
    "resolve_format_locale",
    "resolve_ui_locale",
]
