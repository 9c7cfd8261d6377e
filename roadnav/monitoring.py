from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("roadnav")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the ``roadnav`` logger (once) and set its level."""
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {config.level!r}, using INFO")
        level = logging.INFO

    handler = next(
        (h for h in logger.handlers if getattr(h, "_roadnav", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._roadnav = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.format))

    logger.setLevel(level)
    return logger
