"""Shared Registry - Singleton pattern over a key/value map.

One registry instance is shared per process. Prefer obtaining it once and
injecting it (see ``infrastructure.di``) over calling ``get_instance`` from
deep inside business code.
"""

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SharedRegistry:
    """
    Process-wide key/value registry.

    Thread-safe singleton implementation: instance creation uses
    double-checked locking and every access to the map holds the registry lock.
    """

    _instance: Optional["SharedRegistry"] = None
    _lock = threading.RLock()

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._data: Dict[str, Any] = {}
        self._data_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SharedRegistry":
        """Get singleton instance of the shared registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared registry instance")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide instance so the next access starts empty."""
        with cls._lock:
            cls._instance = None

    def set(self, key: str, value: Any) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: Registry key
            value: Value to store
        """
        with self._data_lock:
            self._data[key] = value
        logger.debug(f"Registry set: {key}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the current value for a key.

        Args:
            key: Registry key
            default: Value returned when the key is absent

        Returns:
            Stored value or ``default``
        """
        with self._data_lock:
            return self._data.get(key, default)

    def has(self, key: str) -> bool:
        with self._data_lock:
            return key in self._data

    def get_data(self) -> Dict[str, Any]:
        """Return a snapshot copy of the whole map."""
        with self._data_lock:
            return dict(self._data)

    def clear(self) -> None:
        with self._data_lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._data_lock:
            return len(self._data)


def get_shared_instance() -> SharedRegistry:
    """Return the process-wide shared registry."""
    return SharedRegistry.get_instance()
