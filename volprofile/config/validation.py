"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from volprofile.models.bucket import BucketCategory
from volprofile.utils.time import parse_clock

SESSION_ORDER = (
    "pre_open_start",
    "morning_start",
    "lunch_start",
    "afternoon_start",
    "close_auction_start",
    "close_auction_end",
)


@dataclass(frozen=True)
class ConfigFieldError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_format_params(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate file format parameters."""
        errors = []

        if "time_format" in params:
            value = params["time_format"]
            if not isinstance(value, str) or "%" not in value:
                errors.append(ConfigFieldError(
                    field="time_format",
                    message="Must be a strftime pattern",
                    value=value
                ))

        if "header" in params:
            value = params["header"]
            if not isinstance(value, str) or len(value.split(",")) != 4:
                errors.append(ConfigFieldError(
                    field="header",
                    message="Must name exactly 4 comma-separated columns",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_validation_params(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate profile invariant parameters."""
        errors = []

        if "share_tolerance" in params:
            value = params["share_tolerance"]
            if not isinstance(value, (int, float)) or value <= 0 or value >= 1:
                errors.append(ConfigFieldError(
                    field="share_tolerance",
                    message="Must be a positive number below 1",
                    value=value
                ))

        if "share_warning_threshold" in params:
            value = params["share_warning_threshold"]
            if not isinstance(value, (int, float)) or value <= 0 or value > 1:
                errors.append(ConfigFieldError(
                    field="share_warning_threshold",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        if "category_minutes" in params:
            value = params["category_minutes"]
            if not isinstance(value, dict):
                errors.append(ConfigFieldError(
                    field="category_minutes",
                    message="Must be a mapping of category code to minutes",
                    value=value
                ))
            else:
                for code, minutes in value.items():
                    if code not in BucketCategory.__members__:
                        errors.append(ConfigFieldError(
                            field=f"category_minutes.{code}",
                            message="Unknown bucket category",
                            value=code
                        ))
                    elif not isinstance(minutes, int) or isinstance(minutes, bool) or minutes <= 0:
                        errors.append(ConfigFieldError(
                            field=f"category_minutes.{code}",
                            message="Must be a positive integer",
                            value=minutes
                        ))

        return errors

    @staticmethod
    def validate_session_params(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate the trading calendar boundaries."""
        errors = []
        parsed = []

        for name in SESSION_ORDER:
            if name not in params:
                continue
            value = params[name]
            try:
                parsed.append((name, parse_clock(value)))
            except (AttributeError, TypeError, ValueError):
                errors.append(ConfigFieldError(
                    field=name,
                    message="Must be a time in HH:MM format",
                    value=value
                ))

        if not errors:
            for (prev_name, prev), (name, current) in zip(parsed, parsed[1:]):
                if current <= prev:
                    errors.append(ConfigFieldError(
                        field=name,
                        message=f"Must be after {prev_name}",
                        value=params[name]
                    ))

        return errors

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate profile source parameters."""
        errors = []

        for name in ("profile_dir", "default_market"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ConfigFieldError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @classmethod
    def validate_sections(cls, config: dict[str, Any]) -> dict[str, list[ConfigFieldError]]:
        """Validate each configuration section, keyed by section name."""
        validators = {
            "format": cls.validate_format_params,
            "validation": cls.validate_validation_params,
            "session": cls.validate_session_params,
            "source": cls.validate_source_params,
        }
        results = {}

        for section, validate in validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                results[section] = [ConfigFieldError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                )]
            else:
                results[section] = validate(params)

        return results

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ConfigFieldError]:
        """Validate complete configuration."""
        errors = []
        for section_errors in cls.validate_sections(config).values():
            errors.extend(section_errors)
        return errors
