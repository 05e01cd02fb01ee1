"""Tests for configuration resolution."""

import pytest
from pydantic import ValidationError

from pixcore.schemas import resolve_config, PixcoreConfig, MedianConfig, LoggingConfig
from pixcore.schemas.resolve import deep_merge

pytestmark = pytest.mark.unit


def test_defaults():
    """Defaults: NaN sorts last, WARNING logging."""
    config = resolve_config()
    assert config.median.nan_policy == "last"
    assert config.logging.level == "WARNING"


def test_nested_override_keeps_other_sections():
    """Overriding one section keeps the other at its default."""
    config = resolve_config({"median": {"nan_policy": "raise"}})
    assert config.median.nan_policy == "raise"
    assert config.logging.level == "WARNING"


def test_level_is_case_insensitive():
    """Lowercase log levels are normalised."""
    config = resolve_config({"logging": {"level": "debug"}})
    assert config.logging.level == "DEBUG"


def test_existing_config_passes_through():
    """A resolved config is returned as is."""
    config = PixcoreConfig(median=MedianConfig(nan_policy="raise"))
    assert resolve_config(config) is config


def test_config_is_frozen():
    """Resolved config rejects assignment."""
    config = resolve_config()
    with pytest.raises(ValidationError):
        config.median = MedianConfig()


@pytest.mark.parametrize("override", [
    {"median": {"nan_policy": "first"}},
    {"logging": {"level": "LOUD"}},
    {"unknown": 1},
    {"median": {"nan_policy": "last", "extra": True}},
])
def test_invalid_overrides_rejected(override):
    """Bad values and unknown keys fail validation."""
    with pytest.raises(ValidationError):
        resolve_config(override)


def test_deep_merge():
    """Nested dicts merge without mutating the base."""
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    merged = deep_merge(base, {"b": {"d": 4, "e": 5}, "f": 6})
    assert merged == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}, "f": 6}
    assert base == {"a": 1, "b": {"c": 2, "d": 3}}


def test_logging_config_direct():
    """LoggingConfig normalises level on direct construction."""
    assert LoggingConfig(level="error").level == "ERROR"
