"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_sentinel_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sentinel parameters."""
        errors = []

        if "name" in params:
            value = params["name"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="sentinel.name",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_manager_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate manager parameters."""
        errors = []

        if "machine_id" in params:
            value = params["machine_id"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="manager.machine_id",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "log_runs" in params and not isinstance(params["log_runs"], bool):
            errors.append(ValidationError(
                field="manager.log_runs",
                message="Must be a boolean",
                value=params["log_runs"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = {
            "sentinel": ConfigValidator.validate_sentinel_params,
            "logging": ConfigValidator.validate_logging_params,
            "manager": ConfigValidator.validate_manager_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
