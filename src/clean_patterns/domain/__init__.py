"""
Domain Layer - one bounded context per kind of example

This domain layer is organized as:
- base/: Shared kernel with exceptions, error kinds and the result value object
- cleancode/: Clean code rules, each with its recommended form
- patterns/: Singleton, Factory, Observer, Strategy and Decorator

No context depends on another context's state.
"""

from .base import (
    ConfigurationError,
    DomainException,
    ErrorKind,
    MethodNotImplementedError,
    OperationResult,
    StrategyNotAssignedError,
    UnrecognizedKindError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "ErrorKind",
    "MethodNotImplementedError",
    "OperationResult",
    "StrategyNotAssignedError",
    "UnrecognizedKindError",
    "ValidationError",
]
