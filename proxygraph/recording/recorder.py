"""In-memory recorder for calls made through recording proxies.

The recorder keeps calls in the order they completed. It performs no
persistence; consumers read the log and decide what to do with it.
"""

from __future__ import annotations

import threading
from typing import List

from .models import MethodCallRecord


class MethodRecorder:
    """Ordered log of recorded method calls."""

    def __init__(self) -> None:
        """Initialize an empty recorder."""
        self._calls: List[MethodCallRecord] = []
        self._lock = threading.Lock()

    def record(self, call: MethodCallRecord) -> None:
        """Append a call to the log.

        Args:
            call: The completed call record
        """
        with self._lock:
            self._calls.append(call)

    def get_calls(self) -> List[MethodCallRecord]:
        """Get all recorded calls, oldest first."""
        with self._lock:
            return list(self._calls)

    def get_recent(self, count: int = 5) -> List[MethodCallRecord]:
        """Get the most recent calls."""
        if count <= 0:
            return []
        with self._lock:
            return self._calls[-count:]

    def calls_for(self, instance_name: str) -> List[MethodCallRecord]:
        """Get the calls made through one proxy."""
        with self._lock:
            return [c for c in self._calls if c.instance_name == instance_name]

    def get_length(self) -> int:
        """Get number of recorded calls."""
        with self._lock:
            return len(self._calls)

    def clear(self) -> None:
        """Remove all calls from the log."""
        with self._lock:
            self._calls.clear()
