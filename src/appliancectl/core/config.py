"""
Configuration management for appliance controller.

Loads configuration from YAML files with environment variable overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml


# Default configuration paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "appliancectl"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
SYSTEM_CONFIG_FILE = Path("/etc/appliancectl/config.yaml")


@dataclass
class LoggingConfig:
    """Event logger configuration."""

    sink: str = "console"
    log_file: Path = field(default_factory=lambda: Path("log.txt"))


@dataclass
class Config:
    """Main configuration for appliance controller."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        logging_data = data.get("logging") or {}

        logging_config = LoggingConfig(
            sink=logging_data.get("sink", "console"),
            log_file=Path(logging_data.get("log_file", "log.txt")),
        )

        return cls(
            logging=logging_config,
            log_level=data.get("log_level", "WARNING"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "logging": {
                "sink": self.logging.sink,
                "log_file": str(self.logging.log_file),
            },
            "log_level": self.log_level,
        }


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Search order:
    1. Explicit path if provided
    2. APPLIANCECTL_CONFIG environment variable
    3. ~/.config/appliancectl/config.yaml
    4. /etc/appliancectl/config.yaml
    5. Default values

    Environment variable overrides:
    - APPLIANCECTL_SINK: Override logging.sink
    - APPLIANCECTL_LOG_FILE: Override logging.log_file
    - APPLIANCECTL_LOG_LEVEL: Override log_level

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Loaded configuration
    """
    if config_path:
        paths_to_try = [config_path]
    else:
        env_path = os.environ.get("APPLIANCECTL_CONFIG")
        paths_to_try = []
        if env_path:
            paths_to_try.append(Path(env_path))
        paths_to_try.extend([DEFAULT_CONFIG_FILE, SYSTEM_CONFIG_FILE])

    config_data = {}
    for path in paths_to_try:
        if path.exists():
            try:
                with open(path) as f:
                    config_data = yaml.safe_load(f) or {}
                break
            except (OSError, yaml.YAMLError):
                continue

    config = Config.from_dict(config_data)
    return _apply_env_overrides(config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config."""
    if "APPLIANCECTL_SINK" in os.environ:
        config.logging.sink = os.environ["APPLIANCECTL_SINK"]

    if "APPLIANCECTL_LOG_FILE" in os.environ:
        config.logging.log_file = Path(os.environ["APPLIANCECTL_LOG_FILE"])

    if "APPLIANCECTL_LOG_LEVEL" in os.environ:
        config.log_level = os.environ["APPLIANCECTL_LOG_LEVEL"]

    return config


def save_config(config: Config, path: Path) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration to save
        path: Path to save to
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        f.write("# Appliance Controller Configuration\n")
        f.write("# logging.sink: console or file\n\n")
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> Config:
    """Get default configuration without loading from file."""
    return Config()
