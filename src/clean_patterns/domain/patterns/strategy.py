"""Payment strategies - behavior swapped at runtime behind one call shape."""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from clean_patterns.domain.base.exceptions import (
    MethodNotImplementedError,
    StrategyNotAssignedError,
    ValidationError,
)

Amount = Union[int, float]

logger = logging.getLogger(__name__)


class PaymentReceipt(BaseModel):
    """Record of a completed payment."""

    model_config = ConfigDict(frozen=True)

    amount: float
    method: str
    message: str


class PaymentStrategy(ABC):
    """Base class for payment strategies."""

    method: str = "abstract"

    @abstractmethod
    def pay(self, amount: Amount) -> PaymentReceipt:
        """
        Pay an amount.

        Raises:
            MethodNotImplementedError: Always, when not overridden by a subclass
        """
        raise MethodNotImplementedError("pay")

    def _receipt(self, amount: Amount, label: str) -> PaymentReceipt:
        return PaymentReceipt(amount=amount, method=self.method, message=f"Paid {amount} with {label}")


class CreditCardPayment(PaymentStrategy):
    method = "credit_card"

    def pay(self, amount: Amount) -> PaymentReceipt:
        return self._receipt(amount, "credit card")


class PayPalPayment(PaymentStrategy):
    method = "paypal"

    def pay(self, amount: Amount) -> PaymentReceipt:
        return self._receipt(amount, "PayPal")


class PaymentContext:
    """Holds the currently selected payment strategy."""

    def __init__(self, strategy: Optional[PaymentStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        """Replace the current strategy."""
        self._strategy = strategy
        logger.debug(f"Payment strategy set to {type(strategy).__name__}")

    def execute_payment(self, amount: Amount) -> PaymentReceipt:
        """
        Pay an amount with the current strategy.

        Raises:
            StrategyNotAssignedError: If no strategy has been set
            ValidationError: If the amount is negative
        """
        if self._strategy is None:
            raise StrategyNotAssignedError(type(self).__name__)
        if amount < 0:
            raise ValidationError("amount must not be negative", details={"amount": amount})

        receipt = self._strategy.pay(amount)
        logger.info(receipt.message)
        return receipt
