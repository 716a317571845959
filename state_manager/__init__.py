"""
State Manager - Finite State Machine Runtime

A small state machine library for control-style applications (robotics
loops and similar). Keeps a registry of named states, each with an action
and a transition predicate, runs the active state and decides which state
becomes active next.
"""

from .state.machine import StateManager
from .state.models import DEFAULT_SENTINEL_NAME, State

__version__ = "0.1.0"
__author__ = "State Manager Team"

__all__ = ["StateManager", "State", "DEFAULT_SENTINEL_NAME"]
