"""In-process holder for the latest published rates snapshot."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock

from currency_exchange.backend.app.models import RatesResponse

logger = logging.getLogger(__name__)


class RatesUnavailableError(LookupError):
    """Raised when no rates snapshot has been published yet."""


class RatesStore:
    """Thread-safe single-slot store for the current :class:`RatesResponse`."""

    def __init__(self, snapshot: RatesResponse | None = None) -> None:
        self._snapshot = snapshot.with_base_rate() if snapshot is not None else None
        self._lock = Lock()

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._snapshot is not None

    def publish(self, snapshot: RatesResponse) -> RatesResponse:
        """Replace the current snapshot; the base is always quoted at 1.0."""

        stored = snapshot.with_base_rate()
        with self._lock:
            self._snapshot = stored
        logger.info(
            "Published rates for %s (base %s, %d currencies)",
            stored.date,
            stored.base,
            len(stored.rates),
        )
        return stored

    def current(self) -> RatesResponse:
        """Return the current snapshot or raise :class:`RatesUnavailableError`."""

        with self._lock:
            snapshot = self._snapshot
        if snapshot is None:
            raise RatesUnavailableError("Rates not available yet")
        return snapshot

    def peek(self) -> RatesResponse | None:
        with self._lock:
            return self._snapshot

    def load_file(self, path: Path) -> RatesResponse:
        """Publish the JSON snapshot stored at ``path``."""

        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return self.publish(RatesResponse.model_validate(payload))


__all__ = ["RatesStore", "RatesUnavailableError"]
