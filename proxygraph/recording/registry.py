"""Registry of published proxy instances."""

import logging
import threading
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class InstanceRegistry:
    """Maps generated endpoint names to the proxies standing in for them."""

    def __init__(self) -> None:
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def publish(self, name: str, proxy: Any) -> None:
        """Publish a proxy under a name.

        Args:
            name: Generated endpoint name
            proxy: Proxy object
        """
        with self._lock:
            if name in self._instances:
                logger.warning(f"Replacing instance already published as '{name}'")
            self._instances[name] = proxy
        logger.debug(f"Published instance '{name}'")

    def get(self, name: str) -> Any:
        """Look up a published proxy.

        Raises:
            KeyError: If nothing is published under name
        """
        with self._lock:
            try:
                return self._instances[name]
            except KeyError:
                raise KeyError(f"No instance published as '{name}'") from None

    def names(self) -> List[str]:
        """Names of all published instances, in publication order."""
        with self._lock:
            return list(self._instances)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
