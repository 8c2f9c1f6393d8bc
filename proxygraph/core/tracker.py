"""Identity tracking for graph traversals.

This module provides the visited set used by the walker to terminate cycles
and to avoid walking shared substructure twice.
"""

from __future__ import annotations

from typing import Any, Dict


class VisitedTracker:
    """Identity-keyed set of nodes already entered by a traversal.

    Membership is by identity, not equality: two equal lists are different
    nodes. The tracker keeps a reference to every node it holds so that an
    id() cannot be recycled by another object while the traversal runs.

    Immutable containers that had to be rebuilt record their replacement, so
    a second path reaching the same original gets the rebuilt object.
    """

    def __init__(self) -> None:
        """Initialize an empty tracker."""
        self._nodes: Dict[int, Any] = {}
        self._replacements: Dict[int, Any] = {}

    def contains(self, node: Any) -> bool:
        """Check whether this exact object has been visited."""
        return id(node) in self._nodes

    def add(self, node: Any) -> None:
        """Mark a node as visited."""
        self._nodes[id(node)] = node

    def replace(self, node: Any, replacement: Any) -> None:
        """Record the object that took a visited node's place."""
        if replacement is not node:
            self._replacements[id(node)] = replacement

    def resolve(self, node: Any) -> Any:
        """Return the replacement recorded for node, or node itself."""
        return self._replacements.get(id(node), node)

    def clear(self) -> None:
        """Forget all visited nodes."""
        self._nodes.clear()
        self._replacements.clear()

    def __contains__(self, node: Any) -> bool:
        return self.contains(node)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._nodes)
