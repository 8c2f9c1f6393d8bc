"""Graph walking and endpoint substitution engine."""

from .containers import walk_array, walk_mapping, walk_sequence
from .graph import ProxyObjectGraph
from .introspection import MemberAccessor, NodeKind, TypeIntrospector
from .substitution import EndpointSubstitutor
from .tracker import VisitedTracker

__all__ = [
    "ProxyObjectGraph",
    "EndpointSubstitutor",
    "VisitedTracker",
    "TypeIntrospector",
    "MemberAccessor",
    "NodeKind",
    "walk_array",
    "walk_mapping",
    "walk_sequence",
]
