"""Recording proxies for remote endpoints.

A RecordingProxy stands in for an endpoint. Every method called through it is
forwarded to the endpoint and logged as a MethodCallRecord. Return values are
run through a ProxyObjectGraph before they reach the caller, so endpoints
handed out by the remote service are proxied as well and the whole chain of
calls ends up in the recorder.

Only regular attribute access is intercepted; special methods such as
len() or iteration are not forwarded.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

from proxygraph.config import WalkerConfig
from proxygraph.core.graph import ProxyObjectGraph
from proxygraph.protocols import NamingService, Registry

from .models import MethodCallRecord
from .naming import UUIDNameFactory

logger = logging.getLogger(__name__)


class RecordingProxy:
    """Forwards calls to an endpoint and records them."""

    __remote_endpoint__ = True

    def __init__(
        self,
        target: Any,
        name: str,
        recorder: Any,
        graph_factory: Callable[[], ProxyObjectGraph],
    ) -> None:
        object.__setattr__(self, "_proxy_target", target)
        object.__setattr__(self, "_proxy_name", name)
        object.__setattr__(self, "_proxy_recorder", recorder)
        object.__setattr__(self, "_proxy_graph_factory", graph_factory)

    @property
    def proxy_name(self) -> str:
        return self._proxy_name

    @property
    def proxy_target(self) -> Any:
        return self._proxy_target

    def __getattr__(self, attr: str) -> Any:
        if attr.startswith("_proxy_"):
            # Not initialized yet (copy, unpickling)
            raise AttributeError(attr)
        value = getattr(self._proxy_target, attr)
        if not callable(value):
            return value

        @functools.wraps(value)
        def invoke(*args: Any, **kwargs: Any) -> Any:
            return self._invoke(attr, value, args, kwargs)

        return invoke

    def __setattr__(self, attr: str, value: Any) -> None:
        setattr(self._proxy_target, attr, value)

    def __repr__(self) -> str:
        return f"<RecordingProxy {self._proxy_name} for {self._proxy_target!r}>"

    def _invoke(
        self, method_name: str, method: Callable[..., Any], args: tuple, kwargs: dict
    ) -> Any:
        call = MethodCallRecord(
            instance_name=self._proxy_name,
            method=method_name,
            args=list(args),
            kwargs=dict(kwargs),
        )
        try:
            result = method(*args, **kwargs)
        except Exception as exc:
            call.exception = repr(exc)
            self._record(call)
            raise

        graph = self._proxy_graph_factory()
        result = graph.substitute(result, call)
        call.remote_instances = graph.drain_discovered_endpoints()
        call.result = result
        self._record(call)
        return result

    def _record(self, call: MethodCallRecord) -> None:
        recorder = self._proxy_recorder
        if recorder is None:
            return
        recorder.record(call)
        logger.debug(f"Recorded {call.instance_name}.{call.method}()")


class StubProxyBuilder:
    """Builds RecordingProxy instances wired to a registry and naming service."""

    def __init__(
        self,
        registry: Registry,
        naming: Optional[NamingService] = None,
        config: Optional[WalkerConfig] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            registry: Registry nested endpoint proxies are published to
            naming: Naming service for nested endpoints, defaults to
                UUIDNameFactory
            config: Walker configuration used on return values
        """
        self._registry = registry
        self._naming = naming or UUIDNameFactory()
        self._config = config

    def build_proxy(self, original: Any, name: str, recorder: Any) -> RecordingProxy:
        """Build a recording proxy for an endpoint."""

        def graph_factory() -> ProxyObjectGraph:
            return ProxyObjectGraph(
                self._registry, recorder, self._naming, self, config=self._config
            )

        return RecordingProxy(original, name, recorder, graph_factory)
