from __future__ import annotations

import logging
from typing import Optional

from seedkit.config import Settings, get_settings
from seedkit.exceptions import ConfigurationError

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_log_level(raw: str) -> int:
    level = (raw or "").strip().upper()
    if level not in _LEVELS:
        raise ConfigurationError(
            f"Unsupported log level: {raw!r}", config_key="LOG_LEVEL"
        )
    return getattr(logging, level)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure the root logger for command-line runs.

    Library code only emits through module loggers; handlers are installed
    here, by the outermost entry point.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=resolve_log_level(settings.LOG_LEVEL),
        format=settings.LOG_FORMAT,
    )
