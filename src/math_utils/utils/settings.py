"""Application settings management using Pydantic Settings.

This module provides centralized configuration management for the application,
with support for environment variables and validation.
"""

from typing import Any, ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_INTEGER_BITS = (8, 16, 32, 64)


class LoggingSettings(BaseSettings):
    """Logging configuration settings.

    All settings can be configured via environment variables.
    """

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    log_format: Literal["json", "console", "plain"] = Field(
        default="console",
        description="Log output format",
    )

    log_file_path: str | None = Field(
        default=None,
        description="Path to log file for local file logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if not isinstance(v, str) or v.upper() not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return v.upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        valid_formats = {"json", "console", "plain"}
        if not isinstance(v, str) or v.lower() not in valid_formats:
            msg = f"Invalid log format: {v}. Must be one of {valid_formats}"
            raise ValueError(msg)
        return v.lower()


class ArithmeticSettings(BaseSettings):
    """Configuration for the arithmetic utility."""

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MATH_",
    )

    integer_bits: int | None = Field(
        default=None,
        description=(
            "Emulated two's-complement integer width. Unset means unbounded "
            "Python integers."
        ),
    )

    zero_division_policy: Literal["zero", "raise"] = Field(
        default="zero",
        description="Behaviour of divide() for a zero divisor: return 0 or raise.",
    )

    @field_validator("integer_bits")
    @classmethod
    def validate_integer_bits(cls, v: int | None) -> int | None:
        """Validate the integer width is one of the supported sizes."""
        if v is not None and v not in SUPPORTED_INTEGER_BITS:
            msg = (
                f"Invalid integer width: {v}. "
                f"Must be one of {list(SUPPORTED_INTEGER_BITS)}"
            )
            raise ValueError(msg)
        return v

    @field_validator("zero_division_policy", mode="before")
    @classmethod
    def validate_zero_division_policy(cls, v: str) -> str:
        """Normalise the policy name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def strict(self) -> bool:
        """Check if division by zero should raise."""
        return self.zero_division_policy == "raise"


def get_settings() -> LoggingSettings:
    """Get the global settings instance.

    Returns:
        LoggingSettings: The settings instance

    """
    if LoggingSettings.instance is None:
        LoggingSettings.instance = LoggingSettings()
    return LoggingSettings.instance


def reset_settings() -> None:
    """Reset the global settings instance.

    This is mainly useful for testing.
    """
    LoggingSettings.instance = None


def get_arithmetic_settings() -> ArithmeticSettings:
    """Get the global arithmetic settings instance."""
    if ArithmeticSettings.instance is None:
        ArithmeticSettings.instance = ArithmeticSettings()
    return ArithmeticSettings.instance


def reset_arithmetic_settings() -> None:
    """Reset the global arithmetic settings instance."""
    ArithmeticSettings.instance = None
