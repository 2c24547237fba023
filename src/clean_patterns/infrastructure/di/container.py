"""
Dependency Injection Container implementation.

Shared objects such as the process-wide registry are created once, registered
here and handed to the code that needs them, instead of being reached through
module-level globals.
"""
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar, cast

from clean_patterns.infrastructure.di.exceptions import FactoryError, UnregisteredDependencyError
from clean_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


class DIContainer:
    """
    Dependency injection container.

    Resolution order for ``get``: pre-registered instances, then singletons
    (created on first use when registered as a class), then factories.
    """

    def __init__(self) -> None:
        """Initialize an empty container."""
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return cls in self._singletons or cls in self._factories or cls in self._instances

    def has(self, service_type: Type[T]) -> bool:
        return self.is_registered(service_type)

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional pre-created instance or factory function
        """
        with self._lock:
            if instance_or_factory is None:
                # No instance provided, register the class itself
                self._singletons[cls] = cls
                logger.debug(f"Registered singleton type {cls.__name__}")
            elif callable(instance_or_factory) and not isinstance(instance_or_factory, type):
                # It's a factory function - execute it immediately
                try:
                    self._singletons[cls] = instance_or_factory(self)
                except Exception as e:
                    logger.error(f"Failed to create singleton from factory for {cls.__name__}: {str(e)}")
                    raise FactoryError(cls, f"Factory function failed: {str(e)}", e)
                logger.debug(f"Registered singleton from factory for {cls.__name__}")
            else:
                self._singletons[cls] = instance_or_factory
                logger.debug(f"Registered pre-created singleton for {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """
        Register a factory function for a type.

        The factory receives the container and is called on every ``get``.
        """
        with self._lock:
            self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """Register a specific instance for a type."""
        with self._lock:
            self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def get(self, cls: Type[T]) -> T:
        """
        Get an instance of the specified type.

        Raises:
            UnregisteredDependencyError: If the type is not registered
            FactoryError: If a registered factory fails
        """
        class_name = cls.__name__
        with timed_operation(f"Resolve {class_name}"):
            with self._lock:
                if cls in self._instances:
                    return cast(T, self._instances[cls])

                if cls in self._singletons:
                    if isinstance(self._singletons[cls], type):
                        logger.debug(f"Creating singleton instance for {class_name}")
                        self._singletons[cls] = self._singletons[cls]()
                    return cast(T, self._singletons[cls])

                factory = self._factories.get(cls)

            if factory is None:
                raise UnregisteredDependencyError(cls)
            try:
                return cast(T, factory(self))
            except Exception as e:
                logger.error(f"Factory failed to create instance of {class_name}: {str(e)}")
                raise FactoryError(cls, f"Factory function failed: {str(e)}", e)

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._singletons.clear()
            self._factories.clear()
            self._instances.clear()
        logger.debug("Cleared all registrations")


_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def _setup_core_dependencies(container: DIContainer) -> None:
    """Register the shared objects every demo may ask for."""
    from clean_patterns.domain.patterns.singleton import SharedRegistry

    container.register_singleton(SharedRegistry, lambda c: SharedRegistry.get_instance())


def get_container() -> DIContainer:
    """
    Get the global container instance.

    Returns:
        Global container instance
    """
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                container = DIContainer()
                _setup_core_dependencies(container)
                _container = container
    return _container


def reset_container() -> None:
    """Reset the global container instance."""
    global _container
    with _container_lock:
        if _container:
            _container.clear()
        _container = None
