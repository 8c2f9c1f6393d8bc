"""Configuration for proxy object graph walkers.

This module provides the WalkerConfig model and helpers for loading it from
environment variables.
"""

import logging
import os
from typing import Any, Optional, Tuple, Type

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_READ_ERRORS: Tuple[Type[BaseException], ...] = (
    AttributeError,
    PermissionError,
    NotImplementedError,
)
DEFAULT_WRITE_ERRORS: Tuple[Type[BaseException], ...] = (
    AttributeError,
    TypeError,
    ValueError,
)


class WalkerConfig(BaseModel):
    """Configuration model for ProxyObjectGraph.

    Attributes:
        retain_visited: Keep the visited set across top-level calls until
            reset() is called (stateful walker mode)
        reuse_endpoint_proxies: Build one proxy per endpoint identity within
            a traversal instead of one per reachable position
        include_private_members: Also walk members whose names start with "_"
        read_errors: Exception classes treated as recoverable when reading a
            member; anything else aborts the traversal
        write_errors: Exception classes treated as recoverable when writing a
            substituted value back to a member
    """

    retain_visited: bool = False
    reuse_endpoint_proxies: bool = False
    include_private_members: bool = False
    read_errors: Tuple[Type[BaseException], ...] = Field(
        default=DEFAULT_READ_ERRORS
    )
    write_errors: Tuple[Type[BaseException], ...] = Field(
        default=DEFAULT_WRITE_ERRORS
    )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    logger.warning(f"Invalid boolean for {name}: {raw!r}, using {default}")
    return default


def get_walker_config(**overrides: Any) -> WalkerConfig:
    """Get walker configuration from environment variables and defaults.

    Args:
        **overrides: Explicit field values; these take precedence over the
            environment

    Returns:
        WalkerConfig instance

    Environment Variables:
        PROXYGRAPH_RETAIN_VISITED: Keep visited nodes across calls (default: "false")
        PROXYGRAPH_REUSE_ENDPOINT_PROXIES: One proxy per endpoint identity (default: "false")
        PROXYGRAPH_INCLUDE_PRIVATE_MEMBERS: Walk underscore members (default: "false")
    """
    values = {
        "retain_visited": _env_flag("PROXYGRAPH_RETAIN_VISITED", False),
        "reuse_endpoint_proxies": _env_flag(
            "PROXYGRAPH_REUSE_ENDPOINT_PROXIES", False
        ),
        "include_private_members": _env_flag(
            "PROXYGRAPH_INCLUDE_PRIVATE_MEMBERS", False
        ),
    }
    values.update(overrides)
    return WalkerConfig(**values)


__all__ = [
    "WalkerConfig",
    "get_walker_config",
    "DEFAULT_READ_ERRORS",
    "DEFAULT_WRITE_ERRORS",
]
