"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from clean_patterns.config.loader import ConfigurationLoader
from clean_patterns.config.schemas import AppConfig, CleanCodeConfig, LoggingConfig, ObserverConfig
from clean_patterns.domain.base.exceptions import ConfigurationError

T = TypeVar("T", bound=BaseModel)
logger = logging.getLogger(__name__)

_SECTION_BY_TYPE: Dict[Type[BaseModel], str] = {
    LoggingConfig: "logging",
    CleanCodeConfig: "clean_code",
    ObserverConfig: "observer",
}


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is loaded lazily on first access: file data is read, environment
    overrides are applied and the result is validated into AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self._loader.load_configuration(self._config_file)
        config_data = self._loader.apply_environment_overrides(config_data)
        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields)
        logger.debug(f"Configuration loaded for environment {config.environment}")
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """
        Get one configuration section by its schema type.

        Raises:
            ConfigurationError: If the type is not a known section
        """
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        section = _SECTION_BY_TYPE.get(config_type)
        if section is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, section)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted path, e.g. ``clean_code.senior_age_threshold``."""
        node: Any = self.app_config
        for part in key.split("."):
            if isinstance(node, BaseModel) and part in type(node).model_fields:
                node = getattr(node, part)
            else:
                return default
        return node

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config
