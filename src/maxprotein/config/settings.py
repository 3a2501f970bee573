"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".maxprotein"


def default_config_path() -> Path:
    """Return the default config.yaml path."""
    return _default_config_dir() / "config.yaml"


def _default_data_path() -> Path:
    """Return the default ABBREV data path."""
    return _default_config_dir() / "ABBREV.txt"


@dataclass
class DataConfig:
    """Food data configuration."""

    path: Path = field(default_factory=_default_data_path)


@dataclass
class FilterConfig:
    """Candidate filter configuration."""

    min_kcal: int = 0
    max_kcal: int = 2500
    limit: int = 25
    exhaustive_warn_size: int = 25  # Warn above this many exhaustive candidates


@dataclass
class SelectionConfig:
    """Selector configuration."""

    method: str = "greedy"  # "greedy" or "exhaustive"
    total_kcal: int = 2000


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    data: DataConfig = field(default_factory=DataConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.maxprotein/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        if "data" in data:
            data_cfg = data["data"] or {}
            if data_cfg.get("path"):
                settings.data.path = Path(data_cfg["path"]).expanduser()

        if "filter" in data:
            filter_data = data["filter"] or {}
            for key in ("min_kcal", "max_kcal", "limit", "exhaustive_warn_size"):
                if key in filter_data:
                    setattr(settings.filter, key, int(filter_data[key]))

        if "selection" in data:
            sel_data = data["selection"] or {}
            if "method" in sel_data:
                settings.selection.method = sel_data["method"]
            if "total_kcal" in sel_data:
                settings.selection.total_kcal = int(sel_data["total_kcal"])

        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.maxprotein/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        """Return settings as plain YAML-serializable data."""
        return {
            "data": {
                "path": str(self.data.path),
            },
            "filter": {
                "min_kcal": self.filter.min_kcal,
                "max_kcal": self.filter.max_kcal,
                "limit": self.filter.limit,
                "exhaustive_warn_size": self.filter.exhaustive_warn_size,
            },
            "selection": {
                "method": self.selection.method,
                "total_kcal": self.selection.total_kcal,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
