"""
SCRIPTURA - Configuration

Centralized configuration management for the entire system.
Uses environment variables with sensible defaults.
"""
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from core.errors import ScripturaConfigError
from observability.logging import LoggingConfig

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name, "").strip()
    return Path(value) if value else None


def _environment_from_env() -> Environment:
    value = os.getenv("ENVIRONMENT", "development").strip().lower()
    try:
        return Environment(value)
    except ValueError as e:
        raise ScripturaConfigError(
            f"Unknown environment '{value}'",
            config_key="ENVIRONMENT",
            actual_value=value,
            cause=e,
            suggestions=[f"Use one of: {', '.join(env.value for env in Environment)}"],
        ) from e


@dataclass
class CatalogConfig:
    """Book catalog configuration."""
    # None selects the dataset shipped with the data package
    data_path: Optional[Path] = field(default_factory=lambda: _env_path("SCRIPTURA_DATA_PATH"))
    # Reject datasets in which two books share a normalized key
    strict: bool = field(default_factory=lambda: _env_flag("SCRIPTURA_CATALOG_STRICT", "true"))
    cache_enabled: bool = field(default_factory=lambda: _env_flag("SCRIPTURA_CACHE_ENABLED", "true"))


@dataclass
class Config:
    """Main configuration class combining all sub-configs."""
    env: Environment = field(default_factory=_environment_from_env)
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))

    # Sub-configurations
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        if self.catalog.data_path is not None and not self.catalog.data_path.is_file():
            raise ScripturaConfigError(
                f"Book dataset does not exist: {self.catalog.data_path}",
                config_key="SCRIPTURA_DATA_PATH",
                actual_value=str(self.catalog.data_path),
            )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.env == Environment.DEVELOPMENT

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "env": self.env.value,
            "debug": self.debug,
            "catalog": {
                "data_path": str(self.catalog.data_path) if self.catalog.data_path else None,
                "strict": self.catalog.strict,
                "cache_enabled": self.catalog.cache_enabled,
            },
            "logging": {
                "level": self.logging.level,
                "json_format": self.logging.json_format,
                "log_to_file": self.logging.log_to_file,
            },
        }


# Singleton configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    load_dotenv(override=True)
    _config = Config()
    return _config
