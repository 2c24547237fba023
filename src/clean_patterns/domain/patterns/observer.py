"""Observable - synchronous one-to-many notification."""
import logging
from abc import ABC, abstractmethod
from typing import Any, List

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Receives payloads published by an Observable."""

    @abstractmethod
    def update(self, payload: Any) -> None:
        """Handle a published payload."""


class NamedObserver(Observer):
    """Observer that remembers and reports every payload it receives."""

    def __init__(self, name: str, echo: bool = False):
        self.name = name
        self.echo = echo
        self.received: List[Any] = []

    def update(self, payload: Any) -> None:
        self.received.append(payload)
        message = self.describe(payload)
        logger.info(message)
        if self.echo:
            print(message)

    def describe(self, payload: Any) -> str:
        return f"{self.name} received: {payload}"


class Observable:
    """
    Ordered list of observers notified synchronously.

    Observers are called in subscription order with the payload unchanged. With
    ``contain_failures`` enabled an observer that raises is logged and skipped
    so the remaining observers are still notified.
    """

    def __init__(self, contain_failures: bool = True):
        self._observers: List[Observer] = []
        self.contain_failures = contain_failures

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def subscribe(self, observer: Observer) -> None:
        """Append an observer to the notification list."""
        self._observers.append(observer)
        logger.debug(f"Subscribed {type(observer).__name__} ({len(self._observers)} total)")

    def notify(self, payload: Any) -> int:
        """
        Deliver a payload to every subscribed observer.

        Args:
            payload: Opaque value passed to each observer

        Returns:
            Number of observers that handled the payload without raising
        """
        delivered = 0
        for observer in list(self._observers):
            try:
                observer.update(payload)
                delivered += 1
            except Exception as e:
                if not self.contain_failures:
                    raise
                logger.error(f"Observer {type(observer).__name__} failed: {e}")
                # Continue with other observers
        return delivered
