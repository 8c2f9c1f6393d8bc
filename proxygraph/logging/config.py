"""Logging configuration for proxygraph.

Library modules only create module-level loggers; nothing is emitted until an
application attaches a handler. configure_logging() is a convenience for
scripts and test harnesses that want proxygraph output on stderr.
"""

import logging
import os
from typing import Any, Dict, Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_MARKER = "_proxygraph_handler"


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration from environment variables and defaults.

    Returns:
        Dictionary with "level" (int) and "format" (str)

    Environment Variables:
        PROXYGRAPH_LOG_LEVEL: Level name or number (default: "WARNING")
        PROXYGRAPH_LOG_FORMAT: logging format string (default: DEFAULT_FORMAT)
    """
    level_name = os.getenv("PROXYGRAPH_LOG_LEVEL", "WARNING").strip().upper()
    return {
        "level": _resolve_level(level_name),
        "format": os.getenv("PROXYGRAPH_LOG_FORMAT", DEFAULT_FORMAT),
    }


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    logging.getLogger(__name__).warning(
        f"Invalid log level: {level}, using WARNING"
    )
    return logging.WARNING


def configure_logging(
    level: Optional[Union[str, int]] = None, fmt: Optional[str] = None
) -> logging.Logger:
    """Attach a stream handler to the proxygraph logger.

    Calling this more than once replaces the level and format of the
    previously installed handler instead of adding another one.

    Args:
        level: Level name or number. If None, reads PROXYGRAPH_LOG_LEVEL.
        fmt: Format string. If None, reads PROXYGRAPH_LOG_FORMAT.

    Returns:
        The configured "proxygraph" logger
    """
    # Make sure TRACE is registered before resolving level names
    from proxygraph.logging import custom_levels  # noqa: F401

    config = get_logging_config()
    resolved_level = _resolve_level(level) if level is not None else config["level"]
    formatter = logging.Formatter(fmt or config["format"])

    package_logger = logging.getLogger("proxygraph")
    handler = next(
        (h for h in package_logger.handlers if getattr(h, _HANDLER_MARKER, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    handler.setFormatter(formatter)
    handler.setLevel(resolved_level)
    package_logger.setLevel(resolved_level)
    return package_logger


__all__ = [
    "DEFAULT_FORMAT",
    "get_logging_config",
    "configure_logging",
]
