"""Domain base package - shared kernel for every example."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    MethodNotImplementedError,
    StrategyNotAssignedError,
    UnrecognizedKindError,
    ValidationError,
)
from .value_objects import ErrorKind, OperationResult

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
