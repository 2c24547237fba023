# src/clean_patterns/domain/base/exceptions.py
from typing import Any, List, Optional

from clean_patterns.domain.base.value_objects import ErrorKind


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    error_kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, error_kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if error_kind is not None:
            self.error_kind = error_kind


class ValidationError(DomainException):
    """Raised when input validation fails."""

    error_kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnrecognizedKindError(DomainException):
    """Raised when a factory is asked for a kind it does not know."""

    error_kind = ErrorKind.UNRECOGNIZED_KIND

    def __init__(self, kind: Any, supported: Optional[List[str]] = None):
        super().__init__(f"Unrecognized kind: {kind!r}")
        self.kind = kind
        self.supported = supported or []


class StrategyNotAssignedError(DomainException):
    """Raised when a context is executed before a strategy was set."""

    error_kind = ErrorKind.UNASSIGNED_BEHAVIOR

    def __init__(self, context_name: str = "PaymentContext"):
        super().__init__(f"No strategy assigned to {context_name}")
        self.context_name = context_name


class MethodNotImplementedError(DomainException, NotImplementedError):
    """Raised when an abstract operation is called without an override."""

    error_kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, method_name: str):
        super().__init__(f"{method_name}() must be implemented")
        self.method_name = method_name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    error_kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
