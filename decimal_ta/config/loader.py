"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import InvalidConfigError, MalformedDefinitionError
from ..indicators.base import Indicator
from ..indicators.registry import from_dict
from .defaults import DecimalParams, DefaultConfig, LoggingParams, OutputParams, get_default_config
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages settings and indicator definition loading."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load settings overrides from settings.yaml."""
        return self._load_yaml("settings.yaml")

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call overrides (highest priority)
        2. settings.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration, validate it and convert it back to dataclasses.

        Raises:
            InvalidConfigError: If any merged setting fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{error.field}: {error.message} (got {error.value!r})" for error in errors)
            raise InvalidConfigError(f"Invalid configuration in {self.config_dir}: {details}", errors=errors)

        return DefaultConfig(
            decimal=DecimalParams(**config["decimal"]),
            output=OutputParams(**config["output"]),
            logging=LoggingParams(**config["logging"]),
        )

    def load_indicator_definitions(self) -> dict[str, Any]:
        """Load raw named indicator definitions from indicators.yaml."""
        definitions = self._load_yaml("indicators.yaml").get("indicators") or {}

        if not isinstance(definitions, dict):
            raise MalformedDefinitionError(
                "'indicators' section must be a mapping of names to definitions",
                raw_data=str(definitions)[:100],
            )

        return definitions

    def load_indicators(self) -> dict[str, Indicator]:
        """Load and decode named indicators. Decoded indicators are not validated."""
        return {
            name: from_dict(definition)
            for name, definition in self.load_indicator_definitions().items()
        }

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename

        if not path.exists():
            return {}

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MalformedDefinitionError(f"Invalid YAML in {path}: {e}", raw_data=str(path))

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise MalformedDefinitionError(f"{path} must contain a mapping", raw_data=str(path))

        return data

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
