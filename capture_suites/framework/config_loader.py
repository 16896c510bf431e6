"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with environment variable overrides.

Features:
    - Root browser set declared in YAML (mapping, list, or comma string)
    - Environment variable override (BROWSERS overrides browsers,
      LOGGING_LEVEL overrides logging.level)
    - Dot notation path access with defaults

Example config/config.yaml:
    browsers:
      chrome:
        desired_capabilities: {browserName: chrome}
      firefox:
        desired_capabilities: {browserName: firefox}
    logging:
      level: INFO

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (BROWSERS, LOGGING_LEVEL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get_browser_ids()
        ['chrome', 'firefox']
        >>> config.get("logging.level", "INFO")
        'INFO'
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(self._config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "logging.level")
            default: Default value if key not found
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_browser_ids(self) -> List[str]:
        """
        Ordered, de-duplicated browser ids of the root suite.

        Raises:
            ConfigurationError: If "browsers" is not a mapping, list or string
        """
        browsers = self.get("browsers", [])

        if isinstance(browsers, str):
            ids = [part.strip() for part in browsers.split(",")]
        elif isinstance(browsers, dict):
            ids = list(browsers.keys())
        elif isinstance(browsers, list):
            ids = browsers
        else:
            raise ConfigurationError(
                f"'browsers' must be a mapping, a list or a comma-separated string, "
                f"got {type(browsers).__name__}"
            )

        result: List[str] = []
        for browser_id in ids:
            if not isinstance(browser_id, str):
                raise ConfigurationError(f"Browser id must be a string: {browser_id!r}")
            if browser_id and browser_id not in result:
                result.append(browser_id)
        return result

    def reload(self) -> None:
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
]
