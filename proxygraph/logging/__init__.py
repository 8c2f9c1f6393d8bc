"""Logging helpers for proxygraph."""

from .config import DEFAULT_FORMAT, configure_logging, get_logging_config
from .custom_levels import TRACE

__all__ = [
    "TRACE",
    "DEFAULT_FORMAT",
    "configure_logging",
    "get_logging_config",
]
