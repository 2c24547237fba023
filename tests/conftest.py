import os
from unittest.mock import patch

import pytest

from clean_patterns.config.schemas import AppConfig
from clean_patterns.domain.patterns.singleton import SharedRegistry
from clean_patterns.infrastructure.di.container import DIContainer, reset_container
from clean_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry


@pytest.fixture(autouse=True)
def clean_singletons():
    """Give every test a fresh shared registry and DI container."""
    SharedRegistry.reset_instance()
    SingletonRegistry.get_instance().reset()
    reset_container()
    yield
    SharedRegistry.reset_instance()
    SingletonRegistry.get_instance().reset()
    reset_container()


@pytest.fixture
def clean_env():
    """Remove configuration variables that would leak in from the shell."""
    names = [name for name in os.environ if name.startswith("CLEAN_PATTERNS_")]
    names.append("SENIOR_AGE_THRESHOLD")
    with patch.dict(os.environ):
        for name in names:
            os.environ.pop(name, None)
        yield


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def container():
    container = DIContainer()
    container.register_singleton(SharedRegistry, lambda c: SharedRegistry.get_instance())
    return container
