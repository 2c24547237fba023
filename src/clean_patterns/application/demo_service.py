"""Application service that runs each example and collects its output."""
from typing import Callable, Dict, List, Optional

from clean_patterns.application.dto import DemoResult
from clean_patterns.config.schemas import AppConfig
from clean_patterns.domain.base.exceptions import DomainException, UnrecognizedKindError
from clean_patterns.domain.cleancode import (
    ConnectionRetryCounter,
    calculate_percentage,
    create_car,
    create_user,
    format_result,
    greeting_for,
    is_senior,
    process_data,
    safe_divide,
)
from clean_patterns.domain.patterns import (
    Coffee,
    CreditCardPayment,
    MilkDecorator,
    NamedObserver,
    Observable,
    PaymentContext,
    PayPalPayment,
    SharedRegistry,
    SugarDecorator,
    VehicleFactory,
    wrap,
)
from clean_patterns.infrastructure.di.container import DIContainer
from clean_patterns.infrastructure.logging.logger import get_logger
from clean_patterns.infrastructure.patterns.singleton_access import get_singleton

SAMPLE_DATA = [1, 2, "three", 4]
SAMPLE_CAR = {"marca": "Toyota", "modelo": "Corolla", "anio": 2020}


class DemoApplicationService:
    """
    Runs the clean code and pattern examples.

    Shared objects come from the injected container; configuration values come
    from the injected AppConfig. ``error_kind`` on a result records the last
    failure an example demonstrated.
    """

    def __init__(self, config: AppConfig, container: DIContainer):
        self._config = config
        self._container = container
        self._logger = get_logger(__name__)
        self._demos: Dict[str, Callable[[], DemoResult]] = {
            "singleton": self.run_singleton,
            "factory": self.run_factory,
            "observer": self.run_observer,
            "strategy": self.run_strategy,
            "decorator": self.run_decorator,
            "cleancode": self.run_cleancode,
        }

    def available_demos(self) -> List[str]:
        return list(self._demos)

    def run(self, name: str) -> DemoResult:
        """
        Run one example by name.

        Raises:
            UnrecognizedKindError: If no example has that name
        """
        demo = self._demos.get(name)
        if demo is None:
            raise UnrecognizedKindError(name, supported=self.available_demos())
        self._logger.info(f"Running {name} example")
        return demo()

    def run_all(self) -> List[DemoResult]:
        return [demo() for demo in self._demos.values()]

    def run_singleton(self) -> DemoResult:
        injected = self._container.get(SharedRegistry)
        fetched = get_singleton(SharedRegistry)
        injected.set("key", "value")
        return DemoResult(
            name="singleton",
            lines=[
                f"Same instance: {injected is fetched}",
                f"Second handle sees: {fetched.get_data()}",
            ],
            data={"same_instance": injected is fetched, "data": fetched.get_data()},
        )

    def run_factory(self, kinds: Optional[List[str]] = None) -> DemoResult:
        lines = []
        vehicles = []
        error_kind = None
        for kind in kinds or ["sedan", "suv", "unknown"]:
            try:
                vehicle = VehicleFactory.create(kind)
            except UnrecognizedKindError as e:
                lines.append(f"Error: {e}")
                error_kind = e.error_kind
                continue
            vehicles.append(vehicle.model_dump())
            lines.append(f"{kind} -> {vehicle.model} ({vehicle.price})")
        return DemoResult(name="factory", lines=lines, data={"vehicles": vehicles}, error_kind=error_kind)

    def run_observer(
        self, payload: str = "Event 1", observers: Optional[List[NamedObserver]] = None
    ) -> DemoResult:
        observable = Observable(contain_failures=self._config.observer.contain_failures)
        if observers is None:
            observers = [NamedObserver("Observer 1"), NamedObserver("Observer 2")]
        for observer in observers:
            observable.subscribe(observer)
        delivered = observable.notify(payload)
        return DemoResult(
            name="observer",
            lines=[observer.describe(item) for observer in observers for item in observer.received],
            data={"delivered": delivered, "subscribed": len(observers)},
        )

    def run_strategy(self) -> DemoResult:
        context = PaymentContext()
        receipts = []
        for strategy, amount in ((CreditCardPayment(), 100), (PayPalPayment(), 200)):
            context.set_strategy(strategy)
            receipts.append(context.execute_payment(amount))
        return DemoResult(
            name="strategy",
            lines=[receipt.message for receipt in receipts],
            data={"receipts": [receipt.model_dump() for receipt in receipts]},
        )

    def run_decorator(self) -> DemoResult:
        beverage = wrap(Coffee(), MilkDecorator, SugarDecorator)
        return DemoResult(
            name="decorator",
            lines=[beverage.description(), str(beverage.cost())],
            data={"description": beverage.description(), "cost": beverage.cost()},
        )

    def run_cleancode(self) -> DemoResult:
        settings = self._config.clean_code
        lines = [f"15% of 200 is {calculate_percentage(200, 15)}"]

        processed = process_data(SAMPLE_DATA)
        lines.append(format_result(processed.value) if processed.ok else f"Error: {processed.message}")

        senior = is_senior(70, threshold=settings.senior_age_threshold)
        lines.append(f"Age 70 is senior: {senior}")

        counter = ConnectionRetryCounter(settings.max_connection_attempts)
        while not counter.exhausted:
            counter.register_attempt()
        lines.append(f"Connection attempts: {counter.attempts}/{counter.max_attempts}")

        try:
            user = create_user(
                first_name="Juan",
                last_name="Pérez",
                age=30,
                address="Calle Falsa 123",
                phone="123456789",
            )
            car = create_car(SAMPLE_CAR)
            lines.append(f"User: {user.full_name}")
            lines.append(f"Car: {car.brand} {car.model} {car.year}")
        except DomainException as e:
            self._logger.error(f"Parameter object example failed: {e}")
            lines.append(f"Error: {e}")

        division = safe_divide(10, 0)
        lines.append(f"Error: {division.message}" if not division.ok else f"10 / 0 = {division.value}")
        lines.append(f"Guard clauses: {greeting_for(False, False, True)}")

        return DemoResult(
            name="cleancode",
            lines=lines,
            data={
                "sum": processed.value,
                "senior": senior,
                "division_error": division.error_kind.value if division.error_kind else None,
            },
            error_kind=division.error_kind,
        )
