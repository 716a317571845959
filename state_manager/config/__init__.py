"""
Configuration defaults, loading and validation.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader, load_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "load_config",
    "ConfigValidator",
    "ValidationError",
]
