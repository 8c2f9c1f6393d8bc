"""
proxygraph - Remote endpoint substitution for recorded calls.

proxygraph walks the object graph returned by a recorded call to a remote
service and replaces every remote endpoint it finds, however deeply nested in
tuples, lists, mappings or plain objects, with a recording proxy. Calls later
made through those endpoints are captured as well, preserving the full chain
of remote interactions.

Main Exports:
    Core:
        - ProxyObjectGraph: The graph walker
        - Remote: Endpoint capability marker
        - WalkerConfig / get_walker_config: Configuration
        - create_proxy_graph: Factory wiring default collaborators

    Default collaborators:
        - MethodCallRecord, MethodRecorder
        - InstanceRegistry
        - UUIDNameFactory, SequentialNameFactory
        - RecordingProxy, StubProxyBuilder

    Modules:
        - exceptions: Custom exception classes

Example:
    >>> from proxygraph import MethodCallRecord, create_proxy_graph
    >>>
    >>> graph = create_proxy_graph()
    >>> record = MethodCallRecord(instance_name="root", method="lookup")
    >>> result = graph.substitute(service.lookup(), record)
    >>> graph.drain_discovered_endpoints()
    {'r:Calculator:5d0e...': '.calculators[0]'}
"""

__version__ = "0.1.0"

from . import exceptions
from .config import WalkerConfig, get_walker_config
from .core import ProxyObjectGraph, TypeIntrospector
from .factory import create_proxy_graph
from .recording import (
    InstanceRegistry,
    MethodCallRecord,
    MethodRecorder,
    RecordingProxy,
    SequentialNameFactory,
    StubProxyBuilder,
    UUIDNameFactory,
)
from .remote import Remote, is_remote

__all__ = [
    "__version__",
    "ProxyObjectGraph",
    "TypeIntrospector",
    "Remote",
    "is_remote",
    "WalkerConfig",
    "get_walker_config",
    "create_proxy_graph",
    "MethodCallRecord",
    "MethodRecorder",
    "InstanceRegistry",
    "UUIDNameFactory",
    "SequentialNameFactory",
    "RecordingProxy",
    "StubProxyBuilder",
    "exceptions",
]
