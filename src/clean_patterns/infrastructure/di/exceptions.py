"""Dependency injection errors."""
from typing import Any, Optional, Type


class DependencyResolutionError(Exception):
    """Raised when a dependency cannot be resolved."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        name = getattr(dependency_type, "__name__", str(dependency_type))
        super().__init__(f"Cannot resolve {name}: {message}")
        self.dependency_type = dependency_type
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered with the container."""

    def __init__(self, dependency_type: Type):
        super().__init__(dependency_type, "not registered")


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Any] = None):
        super().__init__(dependency_type, message, cause)
