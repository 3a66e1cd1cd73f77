"""Runtime settings sourced from environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, SecretStr

logger = logging.getLogger(__name__)

ENV_PREFIX = "CURRENCY_EXCHANGE_"
_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseModel):
    """Immutable application settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    allowed_origins: tuple[str, ...] = ()
    default_format_locale: str = "en-US"
    rates_file: Path | None = None
    log_level: str = "INFO"
    publish_token: SecretStr | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        values: dict[str, object] = {
            "allowed_origins": _parse_allowed_origins(env.get(f"{ENV_PREFIX}ALLOWED_ORIGINS")),
        }

        locale = (env.get(f"{ENV_PREFIX}DEFAULT_FORMAT_LOCALE") or "").strip()
        if locale:
            values["default_format_locale"] = locale

        rates_file = _parse_path(env.get(f"{ENV_PREFIX}RATES_FILE"), env=f"{ENV_PREFIX}RATES_FILE")
        if rates_file is not None:
            values["rates_file"] = rates_file

        log_level = _parse_log_level(env.get(f"{ENV_PREFIX}LOG_LEVEL"))
        if log_level is not None:
            values["log_level"] = log_level

        token = (env.get(f"{ENV_PREFIX}PUBLISH_TOKEN") or "").strip()
        if token:
            values["publish_token"] = token

        return cls.model_validate(values)


def _parse_allowed_origins(raw: str | None) -> tuple[str, ...]:
    """Convert a comma-separated environment variable into sorted origins."""

    if not raw:
        return ()

    return tuple(sorted({origin.strip() for origin in raw.split(",") if origin.strip()}))


def _parse_path(value: str | None, *, env: str) -> Path | None:
    if value is None or not value.strip():
        return None
    path = Path(value.strip()).expanduser()
    if not path.is_file():
        logger.warning("Ignoring %s; no file at %s", env, path)
        return None
    return path


def _parse_log_level(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Ignoring invalid value for %sLOG_LEVEL: %s", ENV_PREFIX, value)
        return None
    return level


__all__ = ["ENV_PREFIX", "Settings"]
