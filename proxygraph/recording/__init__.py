"""Default collaborators: call records, recorder, naming, registry, proxies."""

from .models import MethodCallRecord
from .naming import SequentialNameFactory, UUIDNameFactory
from .proxy import RecordingProxy, StubProxyBuilder
from .recorder import MethodRecorder
from .registry import InstanceRegistry

__all__ = [
    "MethodCallRecord",
    "MethodRecorder",
    "InstanceRegistry",
    "UUIDNameFactory",
    "SequentialNameFactory",
    "RecordingProxy",
    "StubProxyBuilder",
]
