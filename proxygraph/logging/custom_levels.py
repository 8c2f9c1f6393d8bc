"""TRACE log level for per-node traversal output.

Graph traversal can emit one message per visited node, which is far too
chatty for DEBUG. Importing this module registers TRACE below DEBUG and adds
a matching ``trace`` method to the logger class.
"""

import logging
from typing import Any

TRACE = 5


def _trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a message at TRACE level."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.addLevelName(TRACE, "TRACE")
if not hasattr(logging.getLoggerClass(), "trace"):
    logging.getLoggerClass().trace = _trace


__all__ = ["TRACE"]
