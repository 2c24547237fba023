"""Beverage decorators - incremental cost and description by nested wrapping."""
from abc import ABC, abstractmethod
from typing import Type


class Beverage(ABC):
    """Something with a cost and a description."""

    @abstractmethod
    def cost(self) -> int:
        """Total cost."""

    @abstractmethod
    def description(self) -> str:
        """Human-readable description."""


class Coffee(Beverage):
    def cost(self) -> int:
        return 5

    def description(self) -> str:
        return "Coffee"


class BeverageDecorator(Beverage):
    """
    Wraps exactly one inner beverage and adds a fixed delta and suffix.

    Subclasses only declare ``delta`` and ``suffix``.
    """

    delta: int = 0
    suffix: str = ""

    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    @property
    def inner(self) -> Beverage:
        return self._beverage

    def cost(self) -> int:
        return self._beverage.cost() + self.delta

    def description(self) -> str:
        return f"{self._beverage.description()}{self.suffix}"


class MilkDecorator(BeverageDecorator):
    delta = 2
    suffix = " with milk"


class SugarDecorator(BeverageDecorator):
    delta = 1
    suffix = " with sugar"


def wrap(beverage: Beverage, *decorators: Type[BeverageDecorator]) -> Beverage:
    """Wrap a beverage with each decorator in turn, innermost first."""
    for decorator in decorators:
        beverage = decorator(beverage)
    return beverage
