"""
Configuration loader for classcomposer.

Handles loading configuration from YAML files.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ClassTemplate, ComposerConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


def validate_log_level(level: str) -> str:
    """Validate a logging level name and return it upper-cased."""
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level '{level}'. Valid levels: {list(LOG_LEVELS)}")
    return normalized


def load_config_from_yaml(config_path: Path) -> ComposerConfig:
    """Load configuration from a YAML file."""
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if raw_config is None:
        raise ConfigurationError("Configuration file is empty")

    try:
        config = ComposerConfig(**raw_config)
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}")

    config.log_level = validate_log_level(config.log_level)
    return config


def generate_default_config(output_path: Path) -> None:
    """Generate a default configuration file."""
    default_config = {
        "template": ClassTemplate().model_dump(),
        "output_dir": "./generated",
        "log_level": "INFO",
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)
