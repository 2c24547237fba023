"""Clean code rules - each module holds the recommended form of one rule."""

from .data_processing import (
    calculate_sum,
    format_result,
    print_result,
    process_data,
    validate_data,
)
from .division import divide, safe_divide
from .naming import calculate_percentage
from .nesting import greeting_for
from .parameter_objects import Car, User, create_car, create_user
from .retry_counter import ConnectionRetryCounter
from .thresholds import DEFAULT_SENIOR_AGE_THRESHOLD, is_senior, senior_age_threshold

__all__ = [
    "Car",
    "ConnectionRetryCounter",
    "DEFAULT_SENIOR_AGE_THRESHOLD",
    "User",
    "calculate_percentage",
    "calculate_sum",
    "create_car",
    "create_user",
    "divide",
    "format_result",
    "greeting_for",
    "is_senior",
    "print_result",
    "process_data",
    "safe_divide",
    "senior_age_threshold",
    "validate_data",
]
