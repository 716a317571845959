"""
Successor selection for predicate-driven transitions.

Scans candidates in registry order and returns the first one whose
predicate accepts the active state. The active state itself is never a
candidate, whatever its predicate says.
"""

from typing import Iterable, Optional

from .models import State


def select_successor(candidates: Iterable[State], active_name: str) -> Optional[State]:
    """
    Find the state that should become active next.

    Args:
        candidates: States in insertion order
        active_name: Name of the currently active state

    Returns:
        First eligible state, or None if no state wants to become active
    """
    for state in candidates:
        # The active state is never a candidate
        if state.name == active_name:
            continue
        if state.wants_activation(active_name):
            return state

    return None
