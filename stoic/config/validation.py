"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams, SanitizerParams

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_SANITIZER_FIELDS = frozenset(f.name for f in fields(SanitizerParams))
_LOGGING_FIELDS = frozenset(f.name for f in fields(LoggingParams))


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_sanitizer_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sanitizer parameters."""
        errors = []

        for key in params:
            if key not in _SANITIZER_FIELDS:
                errors.append(ValidationError(
                    field=str(key),
                    message="Unknown sanitizer parameter",
                    value=params[key]
                ))

        if "failure_name_prefix" in params:
            value = params["failure_name_prefix"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="failure_name_prefix",
                    message="Must be a string",
                    value=value
                ))

        if "max_depth" in params:
            value = params["max_depth"]
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value <= 0
            ):
                errors.append(ValidationError(
                    field="max_depth",
                    message="Must be a positive integer or null",
                    value=value
                ))

        for flag in ("log_cycles", "include_trace"):
            if flag in params:
                value = params[flag]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=flag,
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        for key in params:
            if key not in _LOGGING_FIELDS:
                errors.append(ValidationError(
                    field=str(key),
                    message="Unknown logging parameter",
                    value=params[key]
                ))

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(_LOG_LEVELS)}",
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
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "sanitizer" in config:
            section = config["sanitizer"]
            if isinstance(section, dict):
                errors.extend(ConfigValidator.validate_sanitizer_params(section))
            else:
                errors.append(ValidationError(
                    field="sanitizer",
                    message="Must be a mapping",
                    value=section
                ))

        if "logging" in config:
            section = config["logging"]
            if isinstance(section, dict):
                errors.extend(ConfigValidator.validate_logging_params(section))
            else:
                errors.append(ValidationError(
                    field="logging",
                    message="Must be a mapping",
                    value=section
                ))

        return errors
