"""Configuration schemas."""

from .app_schema import AppConfig
from .examples_schema import CleanCodeConfig, ObserverConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "CleanCodeConfig", "LoggingConfig", "ObserverConfig"]
