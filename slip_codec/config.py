"""
Configuration management for the SLIP codec.

Loads/saves TOML configuration for logging and frame dumps.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    frame_dump: bool = Field(default=False, description="Enable frame-level logging")
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log record format",
    )

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        """Normalize and validate log level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level


class Config(BaseModel):
    """Complete SLIP codec configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get default configuration file path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "slip_codec" / "config.toml"


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        path: Configuration file path. If None, uses default location.

    Returns:
        Loaded configuration object.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        # Return default config if file doesn't exist
        return Config()

    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    return Config(**data)


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """
    Save configuration to TOML file.

    Args:
        config: Configuration object to save.
        path: Configuration file path. If None, uses default location.
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    import tomli_w

    with open(path, "wb") as f:
        tomli_w.dump(config.model_dump(), f)


def setup_logging(config: Config) -> None:
    """
    Apply logging configuration.

    Frame dumps from the codec are logged at DEBUG level, so the codec logger
    is only opened up to DEBUG when frame_dump is enabled.

    Args:
        config: Configuration object.
    """
    logging.basicConfig(level=config.logging.level, format=config.logging.format)
    logging.getLogger().setLevel(config.logging.level)

    codec_logger = logging.getLogger("slip_codec.slip")
    if config.logging.frame_dump:
        codec_logger.setLevel(logging.DEBUG)
    else:
        codec_logger.setLevel(max(logging.INFO, logging.getLogger().level))
