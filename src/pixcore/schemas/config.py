"""PixcoreConfig: defaults and runtime configuration.

All defaults live here. Runtime code receives a resolved, frozen
PixcoreConfig and reads its fields directly.
"""

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from pixcore.schemas.base import PixcoreBaseModel


class MedianConfig(PixcoreBaseModel):
    """Median configuration."""
    nan_policy: Literal["last", "raise"] = Field(
        "last", description="Sort NaN after all values, or reject NaN input"
    )


class LoggingConfig(PixcoreBaseModel):
    """Library logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def uppercase_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        return v.upper() if isinstance(v, str) else v


class PixcoreConfig(PixcoreBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
        config = resolve_config({"median": {"nan_policy": "raise"}})
        median(values, nan_policy=config.median.nan_policy)
    """

    median: MedianConfig = Field(default_factory=MedianConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,
    )
