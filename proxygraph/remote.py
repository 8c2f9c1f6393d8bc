"""Remote endpoint capability marker.

An object is treated as a handle to a remotely hosted service when its class
carries the endpoint capability. Detection never looks at type names.

Examples:
    class Calculator(Remote):
        def add(self, a, b): ...

    class LegacyStub:
        __remote_endpoint__ = True

    Remote.register(ThirdPartyStub)
"""

from abc import ABC
from typing import Any


class Remote(ABC):
    """Marker base class for remote service endpoints."""

    __remote_endpoint__ = True

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is not Remote:
            return NotImplemented
        for klass in subclass.__mro__:
            if "__remote_endpoint__" in klass.__dict__:
                return bool(klass.__dict__["__remote_endpoint__"])
        return NotImplemented


def is_remote(obj: Any) -> bool:
    """Check whether an object carries the remote endpoint capability."""
    return isinstance(obj, Remote)


__all__ = ["Remote", "is_remote"]
