"""
Configuration module for listing settings.

This module provides configuration loading and validation for the docs
inventory: which directories are skipped, which files count as documents,
and how the run is logged.
"""
# [CTX:PBI-1:1-5:CFG]

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigValidationError

CONFIG_ENV_VAR = "DOCS_LIST_CONFIG"
DEFAULT_EXCLUDED_DIRS = ("archive", "research")
LOG_FORMATS = ("keyvalue", "json")


@dataclass
class ListingConfig:
    """Configuration for a single listing run."""
    
    excluded_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    suffix: str = ".md"
    log_level: str = "WARNING"
    log_format: str = "keyvalue"
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListingConfig":
        """Create ListingConfig from dictionary."""
        excluded = data.get("excluded_dirs")
        if excluded is None:
            excluded = list(DEFAULT_EXCLUDED_DIRS)
        elif isinstance(excluded, str):
            excluded = [excluded]
        
        return cls(
            excluded_dirs=[str(name) for name in excluded],
            suffix=str(data.get("suffix", ".md")),
            log_level=str(data.get("log_level", "WARNING")).upper(),
            log_format=str(data.get("log_format", "keyvalue")).lower(),
        )
    
    def to_dict(self) -> dict[str, Any]:
        """Convert ListingConfig to dictionary."""
        return {
            "excluded_dirs": list(self.excluded_dirs),
            "suffix": self.suffix,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }
    
    @property
    def numeric_log_level(self) -> int:
        """Return the logging module's numeric value for log_level."""
        return logging.getLevelName(self.log_level)


def default_config_path() -> Path:
    """Return the repository-level config location."""
    return Path(__file__).parents[3] / "config" / "docs_list.yml"


def load_config(
    config_path: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> ListingConfig:
    """
    Load listing configuration from YAML file.
    
    Args:
        config_path: Path to config file. If None, the DOCS_LIST_CONFIG
            environment variable is consulted, then the default location.
        environ: Environment mapping (defaults to os.environ)
        
    Returns:
        ListingConfig, with defaults when no config file exists
        
    Raises:
        ConfigValidationError: If the file is not valid YAML or fails validation
    """
    if environ is None:
        environ = dict(os.environ)
    
    if config_path is None:
        env_path = (environ.get(CONFIG_ENV_VAR) or "").strip()
        config_path = Path(env_path) if env_path else default_config_path()
    else:
        config_path = Path(config_path)
    
    if not config_path.exists():
        # Return default config if file doesn't exist
        return ListingConfig()
    
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {config_path}: {e}") from e
    
    if not data:
        return ListingConfig()
    
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file {config_path} must contain a mapping")
    
    config = ListingConfig.from_dict(data)
    validate_config(config)
    return config


def validate_config(config: ListingConfig) -> None:
    """
    Validate configuration.
    
    Args:
        config: Configuration to validate
        
    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if not config.suffix:
        raise ConfigValidationError("suffix must not be empty")
    
    if not config.suffix.startswith("."):
        raise ConfigValidationError(f"suffix {config.suffix!r} must start with '.'")
    
    for name in config.excluded_dirs:
        if not name.strip():
            raise ConfigValidationError("excluded_dirs entries must not be blank")
        if "/" in name or "\\" in name:
            raise ConfigValidationError(
                f"excluded_dirs entry {name!r} must be a directory name, not a path"
            )
    
    if not isinstance(config.numeric_log_level, int):
        raise ConfigValidationError(f"Unknown log_level {config.log_level!r}")
    
    if config.log_format not in LOG_FORMATS:
        raise ConfigValidationError(
            f"log_format must be one of {', '.join(LOG_FORMATS)}, got {config.log_format!r}"
        )
