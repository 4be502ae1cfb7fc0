# src/editor_events/config/manager.py
import copy
import json
import os
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from editor_events.config.schemas import AppConfig
from editor_events.domain.core.exceptions import ConfigurationError

# ${VAR} or ${VAR:default}, anywhere inside a string value
PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${EDITOR_EVENTS_LOG_LEVEL:INFO}",
        "destination": "${EDITOR_EVENTS_LOG_DESTINATION:stdout}",
        "file_path": "${EDITOR_EVENTS_LOG_FILE:logs/editor_events.log}",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Event manager configuration
    "events": {
        "event_types": ["open", "save"],
        "strict": False,
        "failure_policy": "propagate",
    },
}

# Environment variable -> nested configuration path
ENV_OVERRIDES = {
    "EDITOR_EVENTS_LOG_LEVEL": ("logging", "level"),
    "EDITOR_EVENTS_LOG_DESTINATION": ("logging", "destination"),
    "EDITOR_EVENTS_LOG_FILE": ("logging", "file_path"),
    "EDITOR_EVENTS_STRICT": ("events", "strict"),
    "EDITOR_EVENTS_FAILURE_POLICY": ("events", "failure_policy"),
}


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not provided,
                        EDITOR_EVENTS_CONFIG is used when it points to a file.
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_path = config_file or os.environ.get("EDITOR_EVENTS_CONFIG")
        if config_path:
            self._load_config_file(config_path)

        # Load environment variables (highest priority)
        self._load_env_vars()

        self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )
        _deep_update(self._config, user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} in configuration values."""
        if isinstance(config, str):
            def replace(match: "re.Match[str]") -> str:
                var_name, default = match.group(1), match.group(2)
                # Unset variables without a default keep their placeholder
                return os.environ.get(var_name, match.group(0) if default is None else default)

            return PLACEHOLDER_PATTERN.sub(replace, config)
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values and re-validate.

        Args:
            user_config: Partial configuration dictionary

        Raises:
            ConfigurationError: If the merged result is invalid; the current
                configuration is left unchanged
        """
        candidate = copy.deepcopy(self._config)
        _deep_update(candidate, user_config)
        self._validate(candidate)
        self._config = candidate

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_app_config(self) -> AppConfig:
        """Return the validated configuration model."""
        return self.validate_config()

    def validate_config(self) -> AppConfig:
        """
        Validate the configuration against the AppConfig schema.

        Raises:
            ConfigurationError: If configuration is invalid, listing the offending fields
        """
        return self._validate(self._config)

    def _validate(self, config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(self._interpolate_values(config))
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Configuration validation failed: {e}", missing_fields=fields
            ) from e
