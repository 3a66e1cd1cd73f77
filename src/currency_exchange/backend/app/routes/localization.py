"""Expose translation catalogues to front-end consumers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from currency_exchange.backend.app.localization import load_translations
from currency_exchange.backend.app.services import resolve_ui_locale

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/")
def get_default_translations():
    """Return labels for the locale hinted by the query or ``Accept-Language``."""

    locale = resolve_ui_locale(request, request.args.get("locale"))
    return jsonify(load_translations(locale)), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return labels for a specific locale slug."""

    return jsonify(load_translations(locale)), 200
