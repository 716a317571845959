"""
State data models for the state manager.

A State is an immutable value: a unique name plus an action and a
transition predicate. Equality and hashing use the name only, so two
records with the same name are the same state whatever their callbacks.
"""

from dataclasses import dataclass, field, replace
from typing import Callable

DEFAULT_SENTINEL_NAME = "dummyState"

Action = Callable[[], bool]
TransitionPredicate = Callable[[str], bool]


def always_fail() -> bool:
    """Action stub for states without a configured action."""
    return False


def never_eligible(active_state: str) -> bool:
    """Predicate stub for states without a configured transition predicate."""
    return False


@dataclass(frozen=True)
class State:
    """One mode of operation."""

    name: str
    action: Action = field(default=always_fail, compare=False, repr=False)
    predicate: TransitionPredicate = field(default=never_eligible, compare=False, repr=False)

    # Built-in fallback state tag
    sentinel: bool = field(default=False, compare=False)

    @classmethod
    def make_sentinel(cls, name: str = DEFAULT_SENTINEL_NAME) -> 'State':
        """Create the always-fail fallback state."""
        return cls(name=name, action=always_fail, predicate=never_eligible, sentinel=True)

    def with_action(self, action: Action) -> 'State':
        """Create new state with a replaced action."""
        return replace(self, action=action)

    def with_predicate(self, predicate: TransitionPredicate) -> 'State':
        """Create new state with a replaced transition predicate."""
        return replace(self, predicate=predicate)

    def execute(self) -> bool:
        """Run the action and return its result unchanged."""
        return self.action()

    def wants_activation(self, active_state: str) -> bool:
        """Ask the predicate whether this state should become active."""
        return bool(self.predicate(active_state))
