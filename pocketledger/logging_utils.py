"""Mini README: Application-wide logging helpers for pocketledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-time root handler setup, level from settings.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The root handler is
    attached exactly once so repeated imports (or a CLI calling
    ``configure_root_logger`` explicitly) never duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str, None]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    if level is None:
        from .configuration import get_settings

        level = get_settings().log_level
    numeric = getattr(logging, str(level).strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Attach a single stream handler to the root logger."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
