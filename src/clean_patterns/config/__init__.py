"""Configuration package."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import AppConfig, CleanCodeConfig, LoggingConfig, ObserverConfig

__all__ = [
    "AppConfig",
    "CleanCodeConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
    "LoggingConfig",
    "ObserverConfig",
]
