"""Object graph walker that replaces remote endpoints with recording proxies.

ProxyObjectGraph walks whatever a recorded call returned, depth first, and
swaps every object carrying the remote endpoint capability for a proxy built
by the configured ProxyBuilder. Endpoints nested inside tuples, lists,
mappings and plain objects are all reached, so later calls made through them
are captured too.

Substitution is destructive: lists, dicts and object attributes of the
caller's graph are updated in place. Tuples are rebuilt, because they cannot
be updated, and the rebuilt tuple is stored in the parent.

A ProxyObjectGraph is single-owner and single-thread. The visited set and the
discovered endpoint map live on the instance, so concurrent traversals on one
instance race on them; give every thread its own instance.

Example:
    graph = ProxyObjectGraph(registry, recorder, naming, proxy_builder)
    result = graph.substitute(service.lookup(), record)
    handles = graph.drain_discovered_endpoints()
    # {"r:Calculator:0f3a...": ".calculators[0]"}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from proxygraph.config import WalkerConfig
from proxygraph.core import containers
from proxygraph.core.introspection import MemberAccessor, NodeKind, TypeIntrospector
from proxygraph.core.substitution import EndpointSubstitutor
from proxygraph.core.tracker import VisitedTracker
from proxygraph.exceptions import (
    FatalTraversalError,
    SkippableFieldError,
    UnsupportedContainerShape,
)
from proxygraph.logging.custom_levels import TRACE
from proxygraph.protocols import CallRecord, NamingService, ProxyBuilder, Registry

logger = logging.getLogger(__name__)


class ProxyObjectGraph:
    """Walks an object graph and substitutes remote endpoints with proxies."""

    def __init__(
        self,
        registry: Registry,
        recorder: Any,
        naming: NamingService,
        proxy_builder: ProxyBuilder,
        config: Optional[WalkerConfig] = None,
        introspector: Optional[TypeIntrospector] = None,
    ) -> None:
        """Initialize the walker.

        Args:
            registry: Registry proxies are published to
            recorder: Opaque recorder handed to the proxy builder
            naming: Naming service generating endpoint names
            proxy_builder: Builder constructing proxies for endpoints
            config: Walker configuration, defaults to WalkerConfig()
            introspector: Capability queries, defaults to a TypeIntrospector
                honouring config.include_private_members
        """
        self._config = config or WalkerConfig()
        self._introspector = introspector or TypeIntrospector(
            include_private=self._config.include_private_members
        )
        self._substitutor = EndpointSubstitutor(
            registry,
            recorder,
            naming,
            proxy_builder,
            reuse_proxies=self._config.reuse_endpoint_proxies,
        )
        self._visited = VisitedTracker()
        self._depth = 0
        self._deepest: Tuple[type, str] = (type(None), "")

    @property
    def config(self) -> WalkerConfig:
        return self._config

    def substitute(self, node: Any, record: CallRecord, path: str = "") -> Any:
        """Replace every reachable endpoint in node with a proxy.

        Args:
            node: Root of the object graph
            record: Call record flagged when an endpoint is found
            path: Accessor chain of node relative to the caller's root

        Returns:
            node itself, mutated in place, or its replacement when node is an
            endpoint or a tuple holding one

        Raises:
            FatalTraversalError: If a property reader fails unexpectedly, or
                the graph is nested deeper than the interpreter recursion
                limit allows (each level of nesting costs a few stack
                frames). The graph may be left partially substituted.
        """
        top_level = self._depth == 0
        if top_level and not self._config.retain_visited:
            self._visited.clear()
            self._substitutor.forget_proxies()
        try:
            return self._replace(node, record, path)
        except RecursionError as exc:
            if not top_level:
                raise
            owner_type, deepest_path = self._deepest
            logger.error(f"Object graph too deep to walk, aborted at '{deepest_path}'")
            raise FatalTraversalError(owner_type, None, deepest_path, exc) from exc
        finally:
            if top_level and not self._config.retain_visited:
                self._visited.clear()
                self._substitutor.forget_proxies()

    def drain_discovered_endpoints(self) -> Dict[str, str]:
        """Return the endpoint name -> path map and clear it.

        The map accumulates across substitute() calls until drained.
        """
        return self._substitutor.drain()

    def reset(self) -> None:
        """Forget visited nodes and cached proxies (stateful walker mode)."""
        self._visited.clear()
        self._substitutor.forget_proxies()

    def _replace(self, node: Any, record: CallRecord, path: str) -> Any:
        kind = self._introspector.classify(node)
        if kind is NodeKind.NONE or kind is NodeKind.SCALAR:
            return node

        if self._visited.contains(node):
            logger.log(TRACE, f"Already visited {type(node).__name__} at '{path}'")
            return self._visited.resolve(node)

        if kind is NodeKind.ENDPOINT:
            return self._substitutor.substitute(node, record, path)

        if kind is NodeKind.OPAQUE:
            return node

        logger.log(TRACE, f"Walking {kind.value} {type(node).__name__} at '{path}'")
        self._deepest = (type(node), path)
        # Entered nodes are marked before descending so cycles terminate
        self._visited.add(node)
        self._depth += 1
        try:
            result = self._descend(node, kind, record, path)
        finally:
            self._depth -= 1
        self._visited.replace(node, result)
        return result

    def _descend(
        self, node: Any, kind: NodeKind, record: CallRecord, path: str
    ) -> Any:
        def visit(child: Any, child_path: str) -> Any:
            return self._replace(child, record, child_path)

        try:
            if kind is NodeKind.ARRAY:
                return containers.walk_array(node, visit, path)
            if kind is NodeKind.MAPPING:
                return containers.walk_mapping(node, visit, path)
            if kind is NodeKind.SEQUENCE:
                return containers.walk_sequence(node, visit, path)
            if kind is NodeKind.COLLECTION:
                raise UnsupportedContainerShape(type(node), path)
        except UnsupportedContainerShape as exc:
            logger.info(f"{exc}; leaving it unchanged")
            return node

        self._replace_members(node, record, path)
        return node

    def _replace_members(self, obj: Any, record: CallRecord, path: str) -> None:
        for member in self._introspector.list_members(obj):
            member_path = f"{path}.{member.name}"
            try:
                value = self._read_member(obj, member, member_path)
            except SkippableFieldError as exc:
                logger.warning(str(exc))
                continue

            if value is None or self._introspector.is_scalar(value):
                continue

            new_value = self._replace(value, record, member_path)
            # A getter may return a copy, so values behind a setter are always stored
            if new_value is value and (member.kind == "field" or not member.writable):
                continue

            try:
                self._write_member(obj, member, new_value, member_path)
            except SkippableFieldError as exc:
                logger.warning(str(exc))

    def _read_member(self, obj: Any, member: MemberAccessor, path: str) -> Any:
        if not member.readable:
            raise SkippableFieldError(
                type(obj), member.name, path, "property is not readable"
            )
        try:
            value = member.read(obj)
        except self._config.read_errors as exc:
            raise SkippableFieldError(
                type(obj), member.name, path, f"{type(exc).__name__}: {exc}"
            ) from exc
        except RecursionError:
            raise
        except Exception as exc:
            logger.error(
                f"Exception reading '{member.name}' on {type(obj).__name__}",
                exc_info=True,
            )
            raise FatalTraversalError(type(obj), member.name, path, exc) from exc
        return value

    def _write_member(
        self, obj: Any, member: MemberAccessor, value: Any, path: str
    ) -> None:
        if not member.writable:
            raise SkippableFieldError(
                type(obj),
                member.name,
                path,
                f"no writer, substituted {type(value).__name__} not stored",
            )
        try:
            member.write(obj, value)
        except self._config.write_errors as exc:
            raise SkippableFieldError(
                type(obj), member.name, path, f"{type(exc).__name__}: {exc}"
            ) from exc


__all__ = ["ProxyObjectGraph"]
