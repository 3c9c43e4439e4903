#!/usr/bin/env python3
"""
sm-menu Configuration Management System
Handles the configuration file, environment variables, and defaults
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict
from .context import CliPreferences
from .exceptions import ConfigurationError
from .logger import logger
from .version import __app_name__, __version__

ENV_PREFIX = "SM_MENU_"


class ConfigManager:
    """Manage sm-menu configuration"""

    _instance = None
    _initialized = False

    # Default configuration
    DEFAULT_CONFIG = {
        "app": {
            "name": __app_name__,
            "version": __version__
        },
        "preferences": {
            "colored_prompt": True,
            "show_suggestions": True,
            "confirm_destructive": True,
            "max_list_items": 50
        },
        "logging": {
            "level": "INFO",
            "directory": str(Path.home() / ".sm-menu" / "logs"),
            "max_size_mb": 10,
            "backup_count": 5
        }
    }

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_dir=None):
        if ConfigManager._initialized:
            return

        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".sm-menu"
        self.config_file = self.config_dir / "config.json"

        # Load configuration
        self.config = self._load_config()

        ConfigManager._initialized = True

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file and environment"""
        config = copy.deepcopy(self.DEFAULT_CONFIG)

        # Load from config file if exists
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    file_config = json.load(f)
                    self._deep_merge(config, file_config)
                    logger.info(f"Loaded configuration from {self.config_file}")
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load config file: {e}")

        # Load from environment variables
        self._load_from_env(config)

        return config

    def _deep_merge(self, base: Dict, overlay: Dict):
        """Deep merge overlay config into base"""
        for key, value in overlay.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _load_from_env(self, config: Dict):
        """Load configuration from environment variables"""
        # Pattern: SM_MENU_SECTION_KEY=value
        for env_key, env_value in os.environ.items():
            if env_key.startswith(ENV_PREFIX):
                parts = env_key[len(ENV_PREFIX):].lower().split("_", 1)
                if len(parts) == 2:
                    section, key = parts
                    if section in config:
                        config[section][key] = self._parse_env_value(env_value)

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False
        elif value.isdigit():
            return int(value)
        else:
            try:
                return float(value)
            except ValueError:
                return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value with dot notation

        Args:
            key: Configuration key (e.g., "preferences.max_list_items")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        parts = key.split(".")
        value = self.config

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value with dot notation

        Args:
            key: Configuration key (e.g., "preferences.colored_prompt")
            value: Value to set
        """
        parts = key.split(".")
        config = self.config

        # Navigate to parent dict
        for part in parts[:-1]:
            if part not in config:
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value
        logger.debug(f"Configuration updated: {key} = {value}")

    def save(self) -> Path:
        """
        Save configuration to file

        Returns:
            Path to saved configuration file
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
            return self.config_file
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}") from e

    def reset_to_defaults(self):
        """Reset configuration to defaults"""
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        logger.info("Configuration reset to defaults")

    def validate(self):
        """Validate configuration"""
        max_items = self.get("preferences.max_list_items")
        if isinstance(max_items, bool) or not isinstance(max_items, int) or max_items <= 0:
            raise ConfigurationError(
                "preferences.max_list_items must be a positive integer",
                config_key="preferences.max_list_items"
            )

        logger.debug("Configuration validation passed")

    def preferences(self) -> CliPreferences:
        """Build session preferences from the current configuration"""
        defaults = CliPreferences()
        return CliPreferences(
            colored_prompt=bool(self.get("preferences.colored_prompt", defaults.colored_prompt)),
            show_suggestions=bool(self.get("preferences.show_suggestions", defaults.show_suggestions)),
            confirm_destructive=bool(self.get("preferences.confirm_destructive", defaults.confirm_destructive)),
            max_list_items=self.get("preferences.max_list_items", defaults.max_list_items),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Get entire configuration as dictionary"""
        return copy.deepcopy(self.config)


# Singleton instance
config = ConfigManager()
