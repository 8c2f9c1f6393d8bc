"""Type protocols for the collaborators of the graph walker.

The walker only talks to naming, registry and proxy construction through
these interfaces. Default implementations live in proxygraph.recording.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NamingService(Protocol):
    """Generates a process-unique name for an endpoint instance."""

    def name_for(self, endpoint: Any) -> str:
        """Return a name that never collides for the lifetime of the process.

        Args:
            endpoint: The original endpoint reference

        Returns:
            Unique name string
        """
        ...


@runtime_checkable
class Registry(Protocol):
    """Publishes proxies so the surrounding system can look them up by name."""

    def publish(self, name: str, proxy: Any) -> None:
        """Make a proxy resolvable by name.

        Args:
            name: Generated endpoint name
            proxy: Proxy standing in for the endpoint
        """
        ...


@runtime_checkable
class ProxyBuilder(Protocol):
    """Constructs interception proxies for endpoints."""

    def build_proxy(self, original: Any, name: str, recorder: Any) -> Any:
        """Build a proxy exposing the same endpoint capability as original.

        Args:
            original: The endpoint being replaced
            name: Generated name for the endpoint
            recorder: Opaque recorder handle

        Returns:
            Proxy object
        """
        ...


@runtime_checkable
class CallRecord(Protocol):
    """In-flight recorded call; the walker only sets remote_returned."""

    remote_returned: bool


__all__ = ["NamingService", "Registry", "ProxyBuilder", "CallRecord"]
