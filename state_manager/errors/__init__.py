"""
Exception hierarchy for the state manager.

Domain outcomes (duplicate name, unknown name, no eligible successor) are
reported as boolean returns by the state manager. The exceptions here cover
misuse of the API and invalid configuration.
"""

from .usage import (
    StateManagerError,
    InvalidStateNameError,
    InvalidCallbackError,
)
from .configuration import ConfigurationError

__all__ = [
    "StateManagerError",
    "InvalidStateNameError",
    "InvalidCallbackError",
    "ConfigurationError",
]
