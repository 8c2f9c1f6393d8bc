"""Naming schemes for proxied endpoint instances."""

import itertools
import threading
import uuid
from typing import Any, Dict, Iterator


class UUIDNameFactory:
    """Names endpoints as "r:<ClassName>:<hex id>", fresh on every call."""

    def __init__(self, prefix: str = "r") -> None:
        self._prefix = prefix

    def name_for(self, endpoint: Any) -> str:
        """Generate a unique name for an endpoint instance.

        Args:
            endpoint: The endpoint being proxied

        Returns:
            Unique ID string in the format "prefix:class_name:hex_id"
        """
        hex_id = uuid.uuid4().hex[:24]
        return f"{self._prefix}:{type(endpoint).__name__}:{hex_id}"


class SequentialNameFactory:
    """Names endpoints "<ClassName>_<n>" with a counter per class.

    Names are deterministic for a given call order, which keeps generated
    scripts stable between recording runs.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, Iterator[int]] = {}
        self._lock = threading.Lock()

    def name_for(self, endpoint: Any) -> str:
        class_name = type(endpoint).__name__
        with self._lock:
            counter = self._counters.setdefault(class_name, itertools.count(1))
            return f"{class_name}_{next(counter)}"

    def reset(self) -> None:
        """Restart numbering for every class."""
        with self._lock:
            self._counters.clear()
