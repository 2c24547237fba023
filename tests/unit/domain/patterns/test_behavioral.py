"""Tests for the observer, strategy and decorator examples."""

from unittest.mock import Mock, call

import pytest

from clean_patterns.domain.base.exceptions import StrategyNotAssignedError, ValidationError
from clean_patterns.domain.base.value_objects import ErrorKind, OperationResult
from clean_patterns.domain.patterns.decorator import (
    BeverageDecorator,
    Coffee,
    MilkDecorator,
    SugarDecorator,
    wrap,
)
from clean_patterns.domain.patterns.observer import NamedObserver, Observable, Observer
from clean_patterns.domain.patterns.strategy import (
    CreditCardPayment,
    PaymentContext,
    PaymentStrategy,
    PayPalPayment,
)


class RecordingObserver(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self, payload):
        self.log.append((self.name, payload))


class FailingObserver(Observer):
    def update(self, payload):
        raise RuntimeError("observer error")


class TestObservable:
    """Test synchronous notification."""

    def test_payload_delivered_in_subscription_order_once_each(self):
        log = []
        observable = Observable()
        observable.subscribe(RecordingObserver("Observer 1", log))
        observable.subscribe(RecordingObserver("Observer 2", log))

        delivered = observable.notify("Evento 1")

        assert delivered == 2
        assert log == [("Observer 1", "Evento 1"), ("Observer 2", "Evento 1")]

    def test_payload_passed_unchanged(self):
        payload = {"id": 1}
        observer = Mock(spec=Observer)
        observable = Observable()
        observable.subscribe(observer)

        observable.notify(payload)

        observer.update.assert_called_once_with(payload)
        assert observer.update.call_args == call(payload)

    def test_failing_observer_is_contained(self):
        log = []
        observable = Observable()
        observable.subscribe(FailingObserver())
        observable.subscribe(RecordingObserver("after", log))

        delivered = observable.notify("Evento 1")

        assert delivered == 1
        assert log == [("after", "Evento 1")]

    def test_failure_propagates_when_not_contained(self):
        observable = Observable(contain_failures=False)
        observable.subscribe(FailingObserver())

        with pytest.raises(RuntimeError, match="observer error"):
            observable.notify("Evento 1")

    def test_notify_without_observers(self):
        assert Observable().notify("nothing") == 0

    def test_named_observer_records_and_echoes(self, capsys):
        observer = NamedObserver("Observer 1", echo=True)
        observer.update("Evento 1")

        assert observer.received == ["Evento 1"]
        assert capsys.readouterr().out == "Observer 1 received: Evento 1\n"


class TestPaymentContext:
    """Test the swappable payment behavior."""

    def test_execute_with_credit_card(self):
        context = PaymentContext()
        context.set_strategy(CreditCardPayment())

        receipt = context.execute_payment(100)

        assert receipt.message == "Paid 100 with credit card"
        assert receipt.method == "credit_card"

    def test_strategy_can_be_swapped(self):
        context = PaymentContext(CreditCardPayment())
        context.set_strategy(PayPalPayment())

        assert context.execute_payment(200).message == "Paid 200 with PayPal"

    def test_no_strategy_assigned(self):
        with pytest.raises(StrategyNotAssignedError, match="No strategy assigned") as exc_info:
            PaymentContext().execute_payment(1)
        assert exc_info.value.error_kind == ErrorKind.UNASSIGNED_BEHAVIOR

    def test_negative_amount_rejected(self):
        context = PaymentContext(PayPalPayment())

        with pytest.raises(ValidationError, match="must not be negative"):
            context.execute_payment(-5)

    def test_base_pay_not_implemented(self):
        class DelegatingPayment(PaymentStrategy):
            def pay(self, amount):
                return super().pay(amount)

        with pytest.raises(NotImplementedError, match=r"pay\(\) must be implemented"):
            PaymentContext(DelegatingPayment()).execute_payment(10)

    def test_base_pay_failure_carries_not_implemented_kind(self):
        class DelegatingPayment(PaymentStrategy):
            def pay(self, amount):
                return super().pay(amount)

        with pytest.raises(NotImplementedError) as exc_info:
            DelegatingPayment().pay(10)

        assert exc_info.value.error_kind == ErrorKind.NOT_IMPLEMENTED
        assert OperationResult.from_exception(exc_info.value).error_kind == ErrorKind.NOT_IMPLEMENTED

    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            PaymentStrategy()


class TestBeverageDecorators:
    """Test the wrapping chain."""

    def test_milk_then_sugar(self):
        beverage = SugarDecorator(MilkDecorator(Coffee()))

        assert beverage.cost() == 8
        assert beverage.description() == "Coffee with milk with sugar"

    def test_wrap_helper_follows_wrap_order(self):
        beverage = wrap(Coffee(), SugarDecorator, MilkDecorator)

        assert beverage.cost() == 8
        assert beverage.description() == "Coffee with sugar with milk"

    def test_custom_layer(self):
        class CaramelDecorator(BeverageDecorator):
            delta = 3
            suffix = " with caramel"

        beverage = CaramelDecorator(Coffee())

        assert beverage.cost() == 8
        assert beverage.inner.description() == "Coffee"

    def test_evaluation_is_repeatable(self):
        beverage = wrap(Coffee(), MilkDecorator, MilkDecorator)

        assert [beverage.cost() for _ in range(3)] == [9, 9, 9]
