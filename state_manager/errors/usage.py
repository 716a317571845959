"""
API misuse errors.

Raised when a caller hands the state manager something it cannot store,
such as a non-string state name or a non-callable action.
"""

from typing import Any, Dict, Optional


class StateManagerError(Exception):
    """Base class for all state manager exceptions."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidStateNameError(StateManagerError):
    """State name is not a non-empty string."""

    def __init__(self, message: str, name: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.name = name


class InvalidCallbackError(StateManagerError):
    """Action or transition predicate is not callable."""

    def __init__(self, message: str, state_name: Optional[str] = None,
                 callback_kind: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.state_name = state_name
        self.callback_kind = callback_kind
