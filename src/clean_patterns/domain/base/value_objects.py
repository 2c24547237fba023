"""Shared value objects for the domain layer."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Categories of failure raised by domain operations."""

    INVALID_INPUT = "invalid_input"
    UNRECOGNIZED_KIND = "unrecognized_kind"
    UNASSIGNED_BEHAVIOR = "unassigned_behavior"
    NOT_IMPLEMENTED = "not_implemented"
    CONFIGURATION = "configuration"


class OperationResult(BaseModel):
    """
    Outcome of an operation that reports failures instead of raising them.

    Exactly one of ``value`` or ``error_kind`` is meaningful, depending on ``ok``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    value: Any = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        """Build a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> "OperationResult":
        """Build a failed result."""
        return cls(ok=False, error_kind=error_kind, message=message)

    @classmethod
    def from_exception(cls, error: Exception) -> "OperationResult":
        """Build a failed result from a raised domain exception."""
        error_kind = getattr(error, "error_kind", ErrorKind.INVALID_INPUT)
        return cls.failure(error_kind, str(error))

    def unwrap(self) -> Any:
        """Return the value, or raise ValueError if the operation failed."""
        if not self.ok:
            kind = self.error_kind.value if self.error_kind else "unknown"
            raise ValueError(f"Cannot unwrap failed result ({kind}): {self.message}")
        return self.value
