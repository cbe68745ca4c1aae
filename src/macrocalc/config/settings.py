"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".macrocalc"


def _default_db_path() -> Path:
    """Return the default database path."""
    return _default_config_dir() / "macrocalc.db"


@dataclass
class DatabaseConfig:
    """Database configuration."""

    path: Path = field(default_factory=_default_db_path)


@dataclass
class DisplayConfig:
    """Chart output configuration."""

    chart_output: Path = field(default_factory=lambda: Path("weight_progress.png"))
    chart_width: float = 6.0     # inches
    chart_height: float = 4.0
    chart_dpi: int = 100


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.macrocalc/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        if "database" in data:
            db_data = data["database"] or {}
            if db_data.get("path"):
                settings.database.path = Path(db_data["path"]).expanduser()

        if "display" in data:
            display_data = data["display"] or {}
            if display_data.get("chart_output"):
                settings.display.chart_output = Path(display_data["chart_output"]).expanduser()
            if "chart_width" in display_data:
                settings.display.chart_width = float(display_data["chart_width"])
            if "chart_height" in display_data:
                settings.display.chart_height = float(display_data["chart_height"])
            if "chart_dpi" in display_data:
                settings.display.chart_dpi = int(display_data["chart_dpi"])

        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.macrocalc/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "database": {
                "path": str(self.database.path),
            },
            "display": {
                "chart_output": str(self.display.chart_output),
                "chart_width": self.display.chart_width,
                "chart_height": self.display.chart_height,
                "chart_dpi": self.display.chart_dpi,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


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
