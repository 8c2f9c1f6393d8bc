"""Capability queries used by the graph walker.

The traversal engine never touches the reflection API directly. It asks a
TypeIntrospector what kind of node it is looking at and which members an
object exposes, which keeps the engine testable against synthetic types.
"""

from __future__ import annotations

import array
import enum
import types
from collections.abc import Collection, Mapping, MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel

from proxygraph.remote import is_remote

SCALAR_TYPES: Tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    array.array,
)

OPAQUE_TYPES: Tuple[type, ...] = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    enum.Enum,
)

# Properties declared on these classes belong to the framework, not the model
FRAMEWORK_BASES: Tuple[type, ...] = (object, BaseModel)

_SLOT_INTERNALS = {"__dict__", "__weakref__"}


class NodeKind(enum.Enum):
    """Classification of a node in the object graph."""

    NONE = "none"
    SCALAR = "scalar"
    ENDPOINT = "endpoint"
    ARRAY = "array"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    COLLECTION = "collection"
    OPAQUE = "opaque"
    OBJECT = "object"


@dataclass(frozen=True)
class MemberAccessor:
    """A readable and possibly writable member of a general object.

    Attributes:
        name: Attribute name
        kind: "property" or "field"
        readable: False for write-only properties
        writable: True when a writer exists
    """

    name: str
    kind: str
    readable: bool = True
    writable: bool = True

    def read(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def write(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


class TypeIntrospector:
    """Answers capability questions about runtime objects."""

    def __init__(
        self,
        include_private: bool = False,
        endpoint_check: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        """Initialize the introspector.

        Args:
            include_private: Also list members whose names start with "_"
            endpoint_check: Predicate overriding remote capability detection
        """
        self._include_private = include_private
        self._endpoint_check = endpoint_check or is_remote
        self._property_cache: Dict[type, List[Tuple[str, property]]] = {}

    def is_scalar(self, value: Any) -> bool:
        return isinstance(value, SCALAR_TYPES)

    def is_endpoint(self, value: Any) -> bool:
        return self._endpoint_check(value)

    def is_array_like(self, value: Any) -> bool:
        return isinstance(value, tuple)

    def is_key_value(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def is_sequence(self, value: Any) -> bool:
        return isinstance(value, MutableSequence)

    def is_collection(self, value: Any) -> bool:
        return isinstance(value, Collection)

    def is_mutable_mapping(self, value: Any) -> bool:
        return isinstance(value, MutableMapping)

    def is_opaque(self, value: Any) -> bool:
        return isinstance(value, OPAQUE_TYPES)

    def classify(self, value: Any) -> NodeKind:
        """Classify a node, in the order the walker must apply the rules."""
        if value is None:
            return NodeKind.NONE
        if self.is_scalar(value):
            return NodeKind.SCALAR
        if self.is_endpoint(value):
            return NodeKind.ENDPOINT
        if self.is_opaque(value):
            return NodeKind.OPAQUE
        if self.is_array_like(value):
            return NodeKind.ARRAY
        if self.is_key_value(value):
            return NodeKind.MAPPING
        if self.is_sequence(value):
            return NodeKind.SEQUENCE
        if self.is_collection(value):
            return NodeKind.COLLECTION
        return NodeKind.OBJECT

    def list_members(self, obj: Any) -> List[MemberAccessor]:
        """List the properties and public fields of a general object.

        Properties come first, in class definition order from the most
        derived class. Instance fields shadowed by a property are not listed
        twice.
        """
        members: List[MemberAccessor] = []
        seen: set = set()

        for name, prop in self._properties_of(type(obj)):
            seen.add(name)
            members.append(
                MemberAccessor(
                    name=name,
                    kind="property",
                    readable=prop.fget is not None,
                    writable=prop.fset is not None,
                )
            )

        for name in self._field_names(obj):
            if name in seen:
                continue
            seen.add(name)
            members.append(MemberAccessor(name=name, kind="field"))

        return members

    def _is_visible(self, name: str) -> bool:
        if name.startswith("__"):
            return False
        return self._include_private or not name.startswith("_")

    def _properties_of(self, cls: type) -> List[Tuple[str, property]]:
        cached = self._property_cache.get(cls)
        if cached is not None:
            return cached

        found: Dict[str, property] = {}
        shadowed: set = set()
        for klass in cls.__mro__:
            if klass in FRAMEWORK_BASES:
                continue
            for name, attr in vars(klass).items():
                if name in found or name in shadowed:
                    continue
                if isinstance(attr, property):
                    if self._is_visible(name):
                        found[name] = attr
                else:
                    # A plain attribute in a subclass hides an inherited property
                    shadowed.add(name)

        result = list(found.items())
        self._property_cache[cls] = result
        return result

    def _field_names(self, obj: Any) -> List[str]:
        names: List[str] = []
        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict):
            names.extend(
                n for n in instance_dict if isinstance(n, str) and self._is_visible(n)
            )

        for klass in type(obj).__mro__:
            slots = vars(klass).get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name in _SLOT_INTERNALS or not self._is_visible(name):
                    continue
                if name not in names:
                    names.append(name)
        return names


__all__ = [
    "NodeKind",
    "MemberAccessor",
    "TypeIntrospector",
    "SCALAR_TYPES",
    "OPAQUE_TYPES",
]
