"""Configuration loading errors."""

from typing import Any, Optional

from .usage import StateManagerError


class ConfigurationError(StateManagerError):
    """Configuration file could not be read or failed validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.errors = errors or []
