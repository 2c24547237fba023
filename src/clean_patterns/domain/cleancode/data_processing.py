"""
Small, single-purpose functions.

Validation, summing and presentation are kept apart so each step can be
tested and reused on its own. ``process_data`` composes them and reports the
outcome as an OperationResult instead of raising.
"""
import logging
from numbers import Real
from typing import Any, Iterable, List, Optional, Union

from clean_patterns.domain.base.exceptions import DomainException, ValidationError
from clean_patterns.domain.base.value_objects import OperationResult

Number = Union[int, float]

EMPTY_DATA_MESSAGE = "empty data"

logger = logging.getLogger(__name__)


def _is_number(item: Any) -> bool:
    # bool is an int subclass but is not a quantity
    return isinstance(item, Real) and not isinstance(item, bool)


def validate_data(data: Optional[Iterable[Any]]) -> List[Number]:
    """
    Validate input data and keep only its numeric elements.

    Args:
        data: Sequence of arbitrary items

    Returns:
        Numeric elements in their original order

    Raises:
        ValidationError: If data is None or empty
    """
    if data is None:
        raise ValidationError(EMPTY_DATA_MESSAGE)
    items = list(data)
    if not items:
        raise ValidationError(EMPTY_DATA_MESSAGE)
    return [item for item in items if _is_number(item)]


def calculate_sum(numbers: Iterable[Number]) -> Number:
    """Return the sum of already validated numbers."""
    return sum(numbers)


def format_result(total: Number) -> str:
    return f"The sum is: {total}"


def print_result(total: Number) -> None:
    print(format_result(total))


def process_data(data: Optional[Iterable[Any]], echo: bool = False) -> OperationResult:
    """
    Validate, sum and optionally print a data sequence.

    Returns:
        OperationResult holding the sum, or the error kind on invalid input
    """
    try:
        numbers = validate_data(data)
    except DomainException as e:
        logger.warning(f"Rejected data: {e}")
        return OperationResult.from_exception(e)

    total = calculate_sum(numbers)
    if echo:
        print_result(total)
    return OperationResult.success(total)
