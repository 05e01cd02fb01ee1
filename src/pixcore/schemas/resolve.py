"""Configuration resolution and merging logic.

resolve_config() is the single entrypoint: it merges user overrides over the
defaults and returns a validated, frozen PixcoreConfig.
"""

from typing import Optional, Union

from pixcore.schemas.config import PixcoreConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"d": 4}})
    {'a': 1, 'b': {'c': 2, 'd': 4}}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(user_cfg: Optional[Union[dict, PixcoreConfig]] = None) -> PixcoreConfig:
    """Resolve the runtime configuration.

    Parameters
    ----------
    user_cfg : dict or PixcoreConfig, optional
        Overrides. Nested dicts are merged into the defaults, so
        ``{"median": {"nan_policy": "raise"}}`` leaves logging untouched.

    Returns
    -------
    PixcoreConfig
        Fully validated, immutable configuration.

    Raises
    ------
    ValidationError
        If the merged config fails Pydantic validation.
    """
    if isinstance(user_cfg, PixcoreConfig):
        return user_cfg

    defaults = PixcoreConfig().model_dump()
    merged = deep_merge(defaults, user_cfg or {})
    return PixcoreConfig.model_validate(merged)
