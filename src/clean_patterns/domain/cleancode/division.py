"""Explicit exceptions with a message instead of a silent catch-all."""
import logging
from typing import Union

from clean_patterns.domain.base.exceptions import DomainException, ValidationError
from clean_patterns.domain.base.value_objects import OperationResult

Number = Union[int, float]

ZERO_DIVISOR_MESSAGE = "divisor cannot be zero"

logger = logging.getLogger(__name__)


def divide(dividend: Number, divisor: Number) -> float:
    """
    Divide two numbers.

    Raises:
        ValidationError: If divisor is zero
    """
    if divisor == 0:
        raise ValidationError(ZERO_DIVISOR_MESSAGE, details={"dividend": dividend})
    return dividend / divisor


def safe_divide(dividend: Number, divisor: Number) -> OperationResult:
    """Divide two numbers and report a zero divisor as a failed result."""
    try:
        return OperationResult.success(divide(dividend, divisor))
    except DomainException as e:
        logger.error(f"Error: {e}")
        return OperationResult.from_exception(e)
