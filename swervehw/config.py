"""
Configuration management for swervehw.
"""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

# Default configuration paths
DEFAULT_CONFIG_DIR = Path.home() / ".swervehw"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
CONFIG_ENV_VAR = "SWERVEHW_CONFIG"

# Default configuration
DEFAULT_CONFIG = {
    "resolver": {
        "can_id_warning_threshold": 40,
    },
    "logging": {
        "level": "INFO",
        "console": True,
    },
}


def config_path() -> Path:
    """Path of the configuration file, honouring SWERVEHW_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_FILE


class Config:
    """
    Configuration manager for swervehw.

    Handles loading, saving, and accessing configuration settings.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else config_path()
        self._config = None

    def _load_config(self):
        """Load configuration from file, falling back to defaults."""
        if self.path.exists():
            with open(self.path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration file {self.path} must contain a mapping")
            self._config = loaded

            # Update with any missing default values
            self._update_missing_defaults(self._config, DEFAULT_CONFIG)
        else:
            self._config = copy.deepcopy(DEFAULT_CONFIG)

    def _update_missing_defaults(self, config: Dict[str, Any], defaults: Dict[str, Any]):
        """Recursively update config with missing default values."""
        for key, value in defaults.items():
            if key not in config:
                config[key] = copy.deepcopy(value)
            elif isinstance(value, dict):
                # An empty YAML section ("resolver:") loads as None.
                if not isinstance(config[key], dict):
                    config[key] = copy.deepcopy(value)
                else:
                    self._update_missing_defaults(config[key], value)

    @property
    def _data(self) -> Dict[str, Any]:
        if self._config is None:
            self._load_config()
        return self._config

    def reload(self):
        """Drop cached values and read the file again on next access."""
        self._config = None

    def save(self):
        """Save current configuration to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            yaml.dump(self._data, f, default_flow_style=False)

    def get(self, section: str, key: Optional[str] = None):
        """
        Get configuration value.

        Args:
            section: Configuration section
            key: Configuration key within section (if None, returns entire section)

        Returns:
            Configuration value or section dictionary
        """
        if section not in self._data:
            return None

        if key is None:
            return self._data[section]

        return self._data[section].get(key)

    def set(self, section: str, key: str, value: Any, persist: bool = False):
        """
        Set configuration value.

        Args:
            section: Configuration section
            key: Configuration key within section
            value: Value to set
            persist: Write the configuration file afterwards
        """
        self._data.setdefault(section, {})[key] = value
        if persist:
            self.save()

    def update(self, section: str, values: Dict[str, Any], persist: bool = False):
        """
        Update multiple values in a section.

        Args:
            section: Configuration section
            values: Dictionary of values to update
            persist: Write the configuration file afterwards
        """
        self._data.setdefault(section, {}).update(values)
        if persist:
            self.save()

    @property
    def all(self):
        """Get complete configuration dictionary."""
        return self._data


# Global configuration instance, loaded on first access
config = Config()
