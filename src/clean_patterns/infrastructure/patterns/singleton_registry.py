"""Registry holding one lazily created instance per class."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from clean_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Keeps a single instance of each registered class.

    The registry itself is a singleton; use ``get_instance`` to obtain it.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self) -> None:
        self._instances: Dict[Type, Any] = {}
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, creating it on first request.

        Constructor arguments are only used when the instance is created.
        """
        if singleton_class not in self._instances:
            with self._instances_lock:
                if singleton_class not in self._instances:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
                    self._logger.debug(f"Created singleton instance of {singleton_class.__name__}")
        return cast(T, self._instances[singleton_class])

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an already constructed instance for a class."""
        with self._instances_lock:
            self._instances[singleton_class] = instance

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one class's instance, or every instance when no class is given."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
