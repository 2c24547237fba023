"""Dependency Injection package."""
from .container import DIContainer, get_container, reset_container
from .exceptions import DependencyResolutionError, FactoryError, UnregisteredDependencyError

__all__ = [
    "DIContainer",
    "DependencyResolutionError",
    "FactoryError",
    "UnregisteredDependencyError",
    "get_container",
    "reset_container",
]
