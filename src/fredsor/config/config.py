"""Configuration management for fredsor."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from fredsor.config.paths import default_config_path
from fredsor.platform.logging import logger

ENV_API_KEY: Final[str] = "FRED_API_KEY"
ENV_BASE_URL: Final[str] = "FRED_BASE_URL"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # FRED credential; requests without one are rejected by the service
    api_key: str | None = None

    # Service root, e.g. "https://api.stlouisfed.org"
    base_url: str | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @classmethod
    def load(
        cls,
        config_file: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from file, then apply environment overrides.

        Args:
            config_file: Explicit TOML file. Defaults to ``default_config_path()``.
            env: Environment mapping used for overrides. Defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file is None and env is None:
            return cls._instance

        mapping = env if env is not None else os.environ
        target = config_file if config_file is not None else default_config_path(mapping)

        config_dict: dict[str, Any] = {}
        if target.exists():
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key, value in raw.items():
                if key not in known:
                    logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
                    continue
                # Empty strings mean "unset"
                if isinstance(value, str) and not value.strip():
                    value = None
                config_dict[key] = value
            logger.debug("Configuration loaded from %s", target)

        env_key = (mapping.get(ENV_API_KEY) or "").strip()
        if env_key:
            config_dict["api_key"] = env_key
        env_url = (mapping.get(ENV_BASE_URL) or "").strip()
        if env_url:
            config_dict["base_url"] = env_url

        instance = cls(**config_dict)
        cls._instance = instance
        cls._loaded_from = target
        return instance


# Global configuration instance
config = Config.load()
