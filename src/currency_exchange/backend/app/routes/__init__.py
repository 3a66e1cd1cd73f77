"""Blueprint registrations for application routes."""

from flask import Flask

from .currencies import blueprint as currencies_blueprint
from .localization import blueprint as translations_blueprint
from .rates import blueprint as rates_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(currencies_blueprint)
    app.register_blueprint(translations_blueprint)
    app.register_blueprint(rates_blueprint)
