"""WSGI entrypoint for Passenger-style hosts."""

from currency_exchange.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()
