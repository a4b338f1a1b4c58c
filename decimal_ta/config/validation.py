"""Configuration validation utilities."""

import decimal
from dataclasses import dataclass, fields
from typing import Any

from ..errors import IndicatorError
from ..indicators.registry import from_dict
from .defaults import DecimalParams, LoggingParams, OutputParams

ROUNDING_MODES = frozenset({
    "ROUND_CEILING",
    "ROUND_DOWN",
    "ROUND_FLOOR",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_UP",
    "ROUND_05UP",
})

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters and indicator definitions."""

    @staticmethod
    def validate_decimal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate decimal context parameters."""
        errors = []

        if "precision" in params:
            value = params["precision"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1 or value > decimal.MAX_PREC:
                errors.append(ValidationError(
                    field="precision",
                    message="Must be a positive integer",
                    value=value
                ))

        if "rounding" in params:
            value = params["rounding"]
            if value not in ROUNDING_MODES:
                errors.append(ValidationError(
                    field="rounding",
                    message=f"Must be one of {', '.join(sorted(ROUNDING_MODES))}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "result_places" in params:
            value = params["result_places"]
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                errors.append(ValidationError(
                    field="result_places",
                    message="Must be a non-negative integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(sorted(LOG_LEVELS))}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_indicator_definitions(definitions: dict[str, Any]) -> list[ValidationError]:
        """Decode and validate every named indicator definition."""
        errors = []

        for name, definition in definitions.items():
            try:
                from_dict(definition).validate()
            except IndicatorError as e:
                errors.append(ValidationError(
                    field=f"indicators.{name}",
                    message=f"{type(e).__name__}: {e}",
                    value=definition
                ))

        return errors

    @staticmethod
    def validate_section_fields(section: str, params: dict[str, Any],
                                params_type: type) -> list[ValidationError]:
        """Reject settings the section's parameter dataclass does not define."""
        known = {field.name for field in fields(params_type)}

        return [
            ValidationError(
                field=f"{section}.{key}",
                message=f"Unknown setting, expected one of {', '.join(sorted(known))}",
                value=value
            )
            for key, value in params.items()
            if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("decimal", DecimalParams, ConfigValidator.validate_decimal_params),
            ("output", OutputParams, ConfigValidator.validate_output_params),
            ("logging", LoggingParams, ConfigValidator.validate_logging_params),
        )

        for section, params_type, validate in sections:
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
                continue

            errors.extend(ConfigValidator.validate_section_fields(section, params, params_type))
            errors.extend(validate(params))

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_definitions(config["indicators"]))

        return errors
