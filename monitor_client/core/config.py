"""
Configuration management for the monitor client.

Loads configuration from YAML files and environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigurationError


@dataclass
class MonitorConfig:
    """Sampling configuration."""

    network_interface: str = ""  # Must name an existing interface
    sample_interval_seconds: float = 0.5


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration container."""

    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(path)
        if not config_path.exists():
            config = cls()
            config._apply_env_overrides()
            return config

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a mapping")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        config = cls()

        try:
            if "monitor" in data:
                config.monitor = MonitorConfig(**data["monitor"])

            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        interval = config.monitor.sample_interval_seconds
        try:
            config.monitor.sample_interval_seconds = float(interval)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"sample_interval_seconds is not a number: {interval!r}") from e

        # Override with environment variables
        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides."""
        if os.getenv("MONITOR_NETWORK_INTERFACE"):
            self.monitor.network_interface = os.getenv("MONITOR_NETWORK_INTERFACE")
        if os.getenv("MONITOR_SAMPLE_INTERVAL"):
            try:
                self.monitor.sample_interval_seconds = float(os.getenv("MONITOR_SAMPLE_INTERVAL"))
            except ValueError as e:
                raise ConfigurationError(
                    f"MONITOR_SAMPLE_INTERVAL is not a number: {os.getenv('MONITOR_SAMPLE_INTERVAL')}"
                ) from e

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.logging.level = os.getenv("LOG_LEVEL")
        if os.getenv("LOG_FILE"):
            self.logging.file_path = os.getenv("LOG_FILE")

    def to_yaml(self, path: str):
        """Save configuration to YAML file."""
        data = {
            "monitor": {
                "network_interface": self.monitor.network_interface,
                "sample_interval_seconds": self.monitor.sample_interval_seconds,
            },
            "logging": {
                "level": self.logging.level,
                "file_path": self.logging.file_path,
                "max_file_size_mb": self.logging.max_file_size_mb,
                "backup_count": self.logging.backup_count,
            },
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)


def setup_logging(config: LoggingConfig):
    """Configure the root logger from a LoggingConfig."""
    handlers = [logging.StreamHandler()]
    if config.file_path:
        handlers.append(
            RotatingFileHandler(
                config.file_path,
                maxBytes=config.max_file_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        )

    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        handlers=handlers,
        force=True,
    )


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    # Check common locations
    candidates = [
        Path("config/config.yaml"),
        Path("config.yaml"),
        Path.home() / ".monitor-client" / "config.yaml",
        Path("/etc/monitor-client/config.yaml"),
    ]

    for path in candidates:
        if path.exists():
            return str(path)

    # Return the first candidate as default
    return str(candidates[0])
