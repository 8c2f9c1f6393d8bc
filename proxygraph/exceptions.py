"""Exception classes raised while walking an object graph.

Hierarchy:
    ProxyGraphError
    ├── SkippableFieldError      (member skipped, traversal continues)
    ├── FatalTraversalError      (traversal aborted, propagated to caller)
    └── UnsupportedContainerShape (container left unchanged)
"""

from typing import Any, Optional


class ProxyGraphError(Exception):
    """Base exception for proxygraph errors."""

    pass


class SkippableFieldError(ProxyGraphError):
    """Raised when a single property or field cannot be read or written."""

    def __init__(
        self, owner_type: type, member: str, path: str, reason: Optional[str] = None
    ):
        self.owner_type = owner_type
        self.member = member
        self.path = path
        self.reason = reason
        message = f"Skipping member '{member}' on {owner_type.__name__} at '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FatalTraversalError(ProxyGraphError):
    """Raised when a member reader fails with an unexpected error class.

    Also raised with member None when the graph is nested deeper than the
    interpreter recursion limit allows. The graph may be left partially
    substituted.
    """

    def __init__(
        self, owner_type: type, member: Optional[str], path: str, cause: Any
    ):
        self.owner_type = owner_type
        self.member = member
        self.path = path
        self.cause = cause
        if member is None:
            message = f"Traversal aborted in {owner_type.__name__} at '{path}'"
        else:
            message = (
                f"Exception reading '{member}' on {owner_type.__name__} at '{path}'"
            )
        super().__init__(f"{message}: {type(cause).__name__}: {cause}")


class UnsupportedContainerShape(ProxyGraphError):
    """Raised when a collection offers no positional or key-based update."""

    def __init__(self, container_type: type, path: str):
        self.container_type = container_type
        self.path = path
        super().__init__(
            f"Cannot substitute inside {container_type.__name__} at '{path}'"
        )


__all__ = [
    "ProxyGraphError",
    "SkippableFieldError",
    "FatalTraversalError",
    "UnsupportedContainerShape",
]
