"""
Configuration loading and management.

The config is stored at {home}/config.yaml and contains:
- Translation batch settings (token ceiling, prompt)
- Logging settings
"""

from pathlib import Path
import yaml

from .schemas import AppConfig


CONFIG_FILENAME = "config.yaml"


class ConfigManager:
    """
    Manages the configuration file.

    Usage:
        manager = ConfigManager(home)
        config = manager.load()  # Returns AppConfig
        manager.save(config)     # Persists to disk
    """

    def __init__(self, home: Path):
        self.home = Path(home).expanduser().resolve()
        self.config_path = self.home / CONFIG_FILENAME

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_path.exists()

    def load(self) -> AppConfig:
        """
        Load config from disk.

        Returns AppConfig with defaults if file doesn't exist.
        """
        if not self.config_path.exists():
            return AppConfig()

        with open(self.config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return AppConfig.model_validate(data)

    def save(self, config: AppConfig) -> None:
        """
        Save config to disk.

        Creates the home directory if needed.
        """
        self.home.mkdir(parents=True, exist_ok=True)

        data = config.model_dump(mode="json", exclude_none=True)

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def update(self, updates: dict) -> AppConfig:
        """
        Update specific fields in the config.

        Args:
            updates: Dict of fields to update (can be nested)

        Returns:
            Updated AppConfig
        """
        config = self.load()
        data = config.model_dump()

        _deep_merge(data, updates)

        new_config = AppConfig.model_validate(data)
        self.save(new_config)
        return new_config


def _deep_merge(base: dict, updates: dict) -> None:
    """
    Deep merge updates into base dict (mutates base).
    """
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(home: Path) -> AppConfig:
    manager = ConfigManager(home)
    return manager.load()
