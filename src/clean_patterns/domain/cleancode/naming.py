"""Meaningful names: the signature says what the arguments are."""
from typing import Union

Number = Union[int, float]


def calculate_percentage(value: Number, percentage: Number) -> float:
    """Return ``percentage`` percent of ``value``."""
    return (value * percentage) / 100
