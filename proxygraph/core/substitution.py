"""Endpoint substitution protocol.

Replaces a discovered endpoint with a proxy: flags the call record, asks the
naming service for a name, builds the proxy, publishes it in the registry and
remembers the path at which the endpoint was found.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from proxygraph.protocols import CallRecord, NamingService, ProxyBuilder, Registry

logger = logging.getLogger(__name__)


class EndpointSubstitutor:
    """Builds and publishes proxies for endpoints found during a traversal."""

    def __init__(
        self,
        registry: Registry,
        recorder: Any,
        naming: NamingService,
        proxy_builder: ProxyBuilder,
        reuse_proxies: bool = False,
    ) -> None:
        """Initialize the substitutor.

        Args:
            registry: Registry proxies are published to
            recorder: Opaque recorder handed to the proxy builder
            naming: Naming service generating endpoint names
            proxy_builder: Builder constructing the proxies
            reuse_proxies: Hand out one proxy per endpoint identity until
                forget_proxies() is called
        """
        self._registry = registry
        self._recorder = recorder
        self._naming = naming
        self._proxy_builder = proxy_builder
        self._reuse_proxies = reuse_proxies
        self._instances: Dict[str, str] = {}
        # id(endpoint) -> (endpoint, proxy); endpoint kept alive to pin its id
        self._proxies: Dict[int, Tuple[Any, Any]] = {}

    def substitute(self, endpoint: Any, record: CallRecord, path: str) -> Any:
        """Replace an endpoint with a published proxy.

        Args:
            endpoint: The endpoint reference found in the graph
            record: Call record to flag as having returned an endpoint
            path: Accessor chain from the traversal root to the endpoint

        Returns:
            The proxy to store in place of the endpoint
        """
        record.remote_returned = True

        if self._reuse_proxies:
            cached = self._proxies.get(id(endpoint))
            if cached is not None:
                logger.debug(f"Reusing proxy for endpoint at '{path}'")
                return cached[1]

        name = self._naming.name_for(endpoint)
        proxy = self._proxy_builder.build_proxy(endpoint, name, self._recorder)
        self._registry.publish(name, proxy)

        if name in self._instances:
            logger.warning(
                f"Endpoint name '{name}' generated twice; "
                f"'{self._instances[name]}' replaced by '{path}'"
            )
        self._instances[name] = path

        if self._reuse_proxies:
            self._proxies[id(endpoint)] = (endpoint, proxy)

        logger.debug(
            f"Substituted {type(endpoint).__name__} at '{path}' with proxy '{name}'"
        )
        return proxy

    def drain(self) -> Dict[str, str]:
        """Return the name -> path map collected so far and clear it."""
        instances = dict(self._instances)
        self._instances.clear()
        return instances

    def pending(self) -> int:
        """Number of discovered endpoints not yet drained."""
        return len(self._instances)

    def forget_proxies(self) -> None:
        """Drop the identity -> proxy cache used in reuse mode."""
        self._proxies.clear()


__all__ = ["EndpointSubstitutor"]
