"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    LoggingParams,
    ManagerParams,
    SentinelParams,
    get_default_config,
)
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def load_file(self, path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
        """
        Read a YAML configuration file.

        Relative paths are resolved against config_dir. A missing default
        file (config_dir/state_manager.yaml) yields an empty mapping; a
        missing explicit path is an error.
        """
        if path is None:
            config_file = self.config_dir / "state_manager.yaml"
            if not config_file.exists():
                return {}
        else:
            config_file = Path(path)
            if not config_file.is_absolute():
                config_file = self.config_dir / config_file

        try:
            with open(config_file) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Could not read configuration: {e}",
                source=str(config_file)
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping",
                source=str(config_file)
            )

        return data

    def merge_config(
        self,
        path: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML file
        3. Defaults (lowest priority)
        """
        config = asdict(self.defaults)

        config = self._deep_merge(config, self.load_file(path))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        path: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge, validate and build a DefaultConfig."""
        merged = self.merge_config(path, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(
                    f"{e.field}: {e.message}" for e in errors
                ),
                source=str(path) if path is not None else None,
                errors=errors
            )

        try:
            return DefaultConfig(
                sentinel=SentinelParams(**merged["sentinel"]),
                logging=LoggingParams(**merged["logging"]),
                manager=ManagerParams(**merged["manager"]),
            )
        except TypeError as e:
            # Unknown keys in a section
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                source=str(path) if path is not None else None
            ) from e

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None
) -> DefaultConfig:
    """Load configuration using a loader rooted at the working directory."""
    return ConfigLoader.create().load(path, overrides)
