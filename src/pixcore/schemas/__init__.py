"""Pydantic configuration schemas for pixcore.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
PixcoreConfig : class
    Fully validated, immutable runtime configuration
MedianConfig : class
    Median behaviour (non-finite ordering)
LoggingConfig : class
    Library log level
"""

from pixcore.schemas.config import PixcoreConfig, MedianConfig, LoggingConfig
from pixcore.schemas.resolve import resolve_config

__all__ = [
    'resolve_config',
    'PixcoreConfig',
    'MedianConfig',
    'LoggingConfig',
]
