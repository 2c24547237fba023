"""Tests for the DI container, singleton access and logging setup."""

import logging
from unittest.mock import Mock

import pytest

from clean_patterns.config.schemas import LoggingConfig
from clean_patterns.domain.patterns.singleton import SharedRegistry, get_shared_instance
from clean_patterns.domain.patterns.strategy import PaymentContext
from clean_patterns.infrastructure.di.container import DIContainer, get_container, reset_container
from clean_patterns.infrastructure.di.exceptions import FactoryError, UnregisteredDependencyError
from clean_patterns.infrastructure.logging.logger import get_logger, setup_logging
from clean_patterns.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    def __init__(self, start=0):
        self.value = start


class TestDIContainer:
    """Test container registration and resolution."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = DIContainer()

    def test_instance_registration(self):
        counter = Counter()
        self.container.register_instance(Counter, counter)

        assert self.container.get(Counter) is counter
        assert self.container.has(Counter)

    def test_singleton_class_created_once(self):
        self.container.register_singleton(Counter)

        assert self.container.get(Counter) is self.container.get(Counter)

    def test_singleton_factory_runs_immediately(self):
        factory = Mock(return_value=Counter(5))
        self.container.register_singleton(Counter, factory)

        factory.assert_called_once_with(self.container)
        assert self.container.get(Counter).value == 5

    def test_factory_called_on_every_get(self):
        self.container.register_factory(Counter, lambda c: Counter())

        assert self.container.get(Counter) is not self.container.get(Counter)

    def test_failing_factory_wrapped(self):
        def broken(container):
            raise RuntimeError("boom")

        self.container.register_factory(Counter, broken)

        with pytest.raises(FactoryError, match="boom"):
            self.container.get(Counter)

    def test_unregistered_type(self):
        with pytest.raises(UnregisteredDependencyError, match="Counter: not registered"):
            self.container.get(Counter)

    def test_clear(self):
        self.container.register_singleton(Counter)
        self.container.clear()

        assert not self.container.is_registered(Counter)


class TestGlobalContainer:
    """Test the process-wide container wiring."""

    def test_shared_registry_is_injected_handle(self):
        """Test that the injected registry is the same handle as the shared instance."""
        container = get_container()
        container.get(SharedRegistry).set("k", "v")

        assert get_shared_instance().get("k") == "v"
        assert container.get(SharedRegistry) is SharedRegistry.get_instance()

    def test_only_shared_objects_are_registered(self):
        """Test that single-owner objects such as the payment slot are not wired globally."""
        assert get_container().has(SharedRegistry)
        assert not get_container().has(PaymentContext)

    def test_reset_container(self):
        first = get_container()
        reset_container()

        assert get_container() is not first


class TestSingletonAccess:
    """Test get_singleton fallback behavior."""

    def test_prefers_container_registration(self):
        assert get_singleton(SharedRegistry) is SharedRegistry.get_instance()

    def test_falls_back_to_registry(self):
        first = get_singleton(Counter, 3)
        second = get_singleton(Counter, 99)

        assert first is second
        assert first.value == 3

    def test_registry_reset_for_class(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(Counter)
        registry.reset(Counter)

        assert registry.get(Counter) is not first


class TestLogging:
    """Test logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_setup_logging_sets_root_level(self):
        setup_logging(LoggingConfig(level="debug"))

        assert logging.getLogger().level == logging.DEBUG
        assert get_logger("clean_patterns.test").getEffectiveLevel() == logging.DEBUG

    def test_file_destination_creates_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(LoggingConfig(destination="file", file_path=str(log_file)))

        get_logger("clean_patterns.test").warning("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)
