"""Configuration loader for the data manager and its data sources."""

import yaml
from pathlib import Path
from typing import Any, Mapping

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "sources.yaml"


class Config:
    """Configuration manager that loads from YAML files."""

    def __init__(self, config_path: str | Path | None = None):
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self._config_path = Path(config_path)
        self._config: dict[str, Any] = {}
        self._load()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a config from an already-parsed mapping, bypassing the file."""
        config = cls.__new__(cls)
        config._config_path = None
        config._config = dict(data)
        return config

    def _load(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self._config_path}")

        with open(self._config_path) as f:
            self._config = yaml.safe_load(f) or {}

    def get_source_config(self, data_source_id: str) -> dict[str, Any]:
        """Get configuration for a specific data source."""
        sources = self._config.get('data_sources') or {}
        if data_source_id not in sources:
            raise KeyError(f"Data source '{data_source_id}' not found in configuration")
        return sources[data_source_id] or {}

    def has_source_config(self, data_source_id: str) -> bool:
        return data_source_id in (self._config.get('data_sources') or {})

    def get_enabled_sources(self) -> list[str]:
        """Get list of enabled data source ids."""
        sources = self._config.get('data_sources') or {}
        return [name for name, cfg in sources.items() if (cfg or {}).get('enabled', False)]

    def get_manager_config(self) -> dict[str, Any]:
        """Get the `manager` section (variant name and data source ids)."""
        return self._config.get('manager') or {}

    def get_global_config(self) -> dict[str, Any]:
        """Get global configuration settings."""
        return self._config.get('global') or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level config value."""
        return self._config.get(key, default)
