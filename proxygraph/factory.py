"""Factory for creating fully wired proxy object graphs."""

from typing import Any, Optional

from .config import WalkerConfig, get_walker_config
from .core.graph import ProxyObjectGraph
from .protocols import NamingService, ProxyBuilder, Registry
from .recording import InstanceRegistry, MethodRecorder, StubProxyBuilder
from .recording.naming import UUIDNameFactory


def create_proxy_graph(
    registry: Optional[Registry] = None,
    recorder: Optional[Any] = None,
    naming: Optional[NamingService] = None,
    proxy_builder: Optional[ProxyBuilder] = None,
    config: Optional[WalkerConfig] = None,
) -> ProxyObjectGraph:
    """Create a ProxyObjectGraph, filling in default collaborators.

    Args:
        registry: Registry for proxies. Defaults to a new InstanceRegistry.
        recorder: Recorder handed to proxies. Defaults to a new MethodRecorder.
        naming: Naming service. Defaults to UUIDNameFactory.
        proxy_builder: Proxy builder. Defaults to a StubProxyBuilder sharing
            the registry, naming service and config.
        config: Walker configuration. If None, reads PROXYGRAPH_* environment
            variables.

    Returns:
        Configured ProxyObjectGraph

    Examples:
        graph = create_proxy_graph()
        result = graph.substitute(service.lookup(), record)

        registry = InstanceRegistry()
        graph = create_proxy_graph(registry=registry, naming=SequentialNameFactory())
    """
    if config is None:
        config = get_walker_config()
    if registry is None:
        registry = InstanceRegistry()
    if recorder is None:
        recorder = MethodRecorder()
    if naming is None:
        naming = UUIDNameFactory()
    if proxy_builder is None:
        proxy_builder = StubProxyBuilder(registry, naming, config=config)

    return ProxyObjectGraph(registry, recorder, naming, proxy_builder, config=config)


__all__ = ["create_proxy_graph"]
