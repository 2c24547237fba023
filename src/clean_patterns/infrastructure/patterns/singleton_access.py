"""Standard singleton access functions."""

from typing import Any, Type, TypeVar, cast

from clean_patterns.infrastructure.di.container import get_container
from clean_patterns.infrastructure.di.exceptions import DependencyResolutionError
from clean_patterns.infrastructure.logging.logger import get_logger
from clean_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    The DI container is consulted first so that explicitly registered shared
    handles win. Classes the container does not know are served from the
    SingletonRegistry, which creates one instance per class.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    container = get_container()
    if container.has(singleton_class):
        try:
            return cast(T, container.get(singleton_class))
        except DependencyResolutionError as e:
            get_logger(__name__).debug(
                "DI container could not provide %s, falling back to registry: %s",
                singleton_class.__name__,
                str(e),
            )

    registry = SingletonRegistry.get_instance()
    return registry.get(singleton_class, *args, **kwargs)
