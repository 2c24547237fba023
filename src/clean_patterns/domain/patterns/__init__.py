"""Design pattern examples."""

from .decorator import Beverage, BeverageDecorator, Coffee, MilkDecorator, SugarDecorator, wrap
from .factory import Vehicle, VehicleFactory, VehicleKind, create_vehicle
from .observer import NamedObserver, Observable, Observer
from .singleton import SharedRegistry, get_shared_instance
from .strategy import (
    CreditCardPayment,
    PaymentContext,
    PaymentReceipt,
    PaymentStrategy,
    PayPalPayment,
)

__all__ = [
    "Beverage",
    "BeverageDecorator",
    "Coffee",
    "CreditCardPayment",
    "MilkDecorator",
    "NamedObserver",
    "Observable",
    "Observer",
    "PayPalPayment",
    "PaymentContext",
    "PaymentReceipt",
    "PaymentStrategy",
    "SharedRegistry",
    "SugarDecorator",
    "Vehicle",
    "VehicleFactory",
    "VehicleKind",
    "create_vehicle",
    "get_shared_instance",
    "wrap",
]
