"""Configuration loading from files and the environment."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from clean_patterns.config.utils.env_expansion import expand_config_env_vars
from clean_patterns.domain.base.exceptions import ConfigurationError
from clean_patterns.domain.cleancode.thresholds import SENIOR_AGE_THRESHOLD_ENV

logger = logging.getLogger(__name__)

ENV_PREFIX = "CLEAN_PATTERNS_"
ENV_NESTING_SEPARATOR = "__"

# Bare environment variables mapped to configuration paths
ENV_ALIASES: Dict[str, tuple] = {
    SENIOR_AGE_THRESHOLD_ENV: ("clean_code", "senior_age_threshold"),
}


class ConfigurationLoader:
    """
    Loads raw configuration data.

    Sources, lowest precedence first:
    - configuration file (JSON or YAML)
    - CLEAN_PATTERNS_<SECTION>__<FIELD> environment variables
    - bare aliases such as SENIOR_AGE_THRESHOLD
    """

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load a JSON or YAML configuration file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_file)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}")

        try:
            if path.suffix.lower() in (".yml", ".yaml"):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text) if text.strip() else {}
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file {config_file}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

        logger.debug(f"Loaded configuration from {config_file}")
        return expand_config_env_vars(data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from a file when given, otherwise start from defaults."""
        if config_file:
            return self.load_from_file(config_file)
        return {}

    def apply_environment_overrides(
        self, config_data: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """Return a copy of config_data with environment overrides applied."""
        env = os.environ if environ is None else environ
        result = json.loads(json.dumps(config_data, default=str))

        for name, value in env.items():
            if not name.startswith(ENV_PREFIX):
                continue
            path = name[len(ENV_PREFIX):].lower().split(ENV_NESTING_SEPARATOR)
            self._set_path(result, path, value)
            logger.debug(f"Applied environment override {name}")

        for name, path in ENV_ALIASES.items():
            value = env.get(name)
            if value is not None and value.strip() != "":
                self._set_path(result, list(path), value)
                logger.debug(f"Applied environment override {name}")

        return result

    @staticmethod
    def _set_path(data: Dict[str, Any], path: list, value: Any) -> None:
        target = data
        for key in path[:-1]:
            node = target.get(key)
            if not isinstance(node, dict):
                node = {}
                target[key] = node
            target = node
        target[path[-1]] = value
