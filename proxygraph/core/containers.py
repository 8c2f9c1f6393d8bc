"""Container traversal strategies.

Each strategy walks every element of a container through a visit callback
and stores the returned value back without changing the container's shape:
tuples keep their length and type, sequences keep element count and order,
mappings keep their key set.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence
from typing import Any, Callable, List, Mapping, Sequence

from proxygraph.exceptions import UnsupportedContainerShape

Visit = Callable[[Any, str], Any]


def _rebuild(cls: type, values: List[Any], path: str) -> Any:
    try:
        make = getattr(cls, "_make", None)
        rebuilt = make(values) if make is not None else cls(values)
    except (TypeError, ValueError) as exc:
        raise UnsupportedContainerShape(cls, path) from exc
    if len(rebuilt) != len(values):
        raise UnsupportedContainerShape(cls, path)
    return rebuilt


def walk_array(items: Sequence[Any], visit: Visit, path: str) -> Any:
    """Walk a tuple element by element.

    Tuples cannot be updated in place, so when any element is substituted a
    new tuple of the same type and length is returned for the parent to
    store. An unchanged tuple is returned as is.

    Raises:
        UnsupportedContainerShape: If a tuple subclass cannot be rebuilt from
            its elements. This is checked before any element is visited.
    """
    cls = type(items)
    if cls is not tuple:
        _rebuild(cls, list(items), path)

    replaced: List[Any] = []
    changed = False
    for i, item in enumerate(items):
        new_item = visit(item, f"{path}[{i}]")
        changed = changed or new_item is not item
        replaced.append(new_item)

    if not changed:
        return items
    if cls is tuple:
        return tuple(replaced)
    return _rebuild(cls, replaced, path)


def walk_mapping(mapping: Mapping[Any, Any], visit: Visit, path: str) -> Any:
    """Walk the values of a mapping, writing substitutions back by key.

    Keys are snapshotted before any write and are never substituted.

    Raises:
        UnsupportedContainerShape: If the mapping is read-only
    """
    if not isinstance(mapping, MutableMapping):
        raise UnsupportedContainerShape(type(mapping), path)

    for key in list(mapping.keys()):
        value = mapping[key]
        new_value = visit(value, f"{path}[{key!r}]")
        if new_value is not value:
            mapping[key] = new_value
    return mapping


def walk_sequence(sequence: Sequence[Any], visit: Visit, path: str) -> Any:
    """Walk a mutable sequence positionally, assigning substitutions by index.

    Raises:
        UnsupportedContainerShape: If the sequence has no positional update
    """
    if not isinstance(sequence, MutableSequence):
        raise UnsupportedContainerShape(type(sequence), path)

    for i in range(len(sequence)):
        item = sequence[i]
        new_item = visit(item, f"{path}[{i}]")
        if new_item is not item:
            sequence[i] = new_item
    return sequence


__all__ = ["walk_array", "walk_mapping", "walk_sequence"]
