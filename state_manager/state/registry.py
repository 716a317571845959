"""
Ordered, name-keyed registry of states.

The registry owns every State record and the built-in sentinel. Insertion
order is preserved and is the order used when scanning for a successor.
The sentinel is a member only while no user state exists, so the registry
is never observably empty.
"""

from typing import Iterator, Optional

from ..errors import InvalidCallbackError, InvalidStateNameError
from .models import DEFAULT_SENTINEL_NAME, Action, State, TransitionPredicate


class StateRegistry:
    """Insertion-ordered collection of uniquely named states."""

    def __init__(self, sentinel_name: str = DEFAULT_SENTINEL_NAME):
        self.sentinel = State.make_sentinel(sentinel_name)
        self._states: dict[str, State] = {}
        self._install_sentinel()

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        # Snapshot so callbacks may mutate the registry mid-scan
        return iter(tuple(self._states.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._states

    @property
    def states(self) -> tuple[State, ...]:
        """Members in insertion order."""
        return tuple(self._states.values())

    @property
    def names(self) -> tuple[str, ...]:
        """Member names in insertion order."""
        return tuple(self._states)

    @property
    def holds_sentinel(self) -> bool:
        """True while the sentinel stands in for an empty registry."""
        return self.sentinel.name in self._states

    def is_reserved(self, name: str) -> bool:
        return name == self.sentinel.name

    def lookup(self, name: str) -> Optional[State]:
        """Return the member called name, or None."""
        return self._states.get(name)

    def add(self, name: str) -> bool:
        """
        Append a new state with stub callbacks.

        Returns:
            False if the name is taken or reserved for the sentinel
        """
        _check_name(name, allow_empty=False)

        if name in self._states or self.is_reserved(name):
            return False

        if self.holds_sentinel:
            del self._states[self.sentinel.name]

        self._states[name] = State(name=name)
        return True

    def remove(self, name: str) -> bool:
        """
        Delete a user state.

        The sentinel is put back when the last user state goes. Removing
        the sentinel while it is the sole member reinstalls it at once, so
        the registry is left as it was.

        Returns:
            False if the name is not a member
        """
        _check_name(name)

        if name not in self._states:
            return False

        if self.is_reserved(name):
            return True

        del self._states[name]

        if not self._states:
            self._install_sentinel()

        return True

    def set_action(self, name: str, action: Action) -> bool:
        _check_name(name)
        _check_callback(action, name, "action")

        state = self._states.get(name)
        if state is None or state.sentinel:
            return False

        self._states[name] = state.with_action(action)
        return True

    def set_predicate(self, name: str, predicate: TransitionPredicate) -> bool:
        _check_name(name)
        _check_callback(predicate, name, "predicate")

        state = self._states.get(name)
        if state is None or state.sentinel:
            return False

        self._states[name] = state.with_predicate(predicate)
        return True

    def _install_sentinel(self) -> None:
        self._states[self.sentinel.name] = self.sentinel


def _check_name(name: object, allow_empty: bool = True) -> None:
    if not isinstance(name, str) or not (name or allow_empty):
        raise InvalidStateNameError(
            f"State name must be a {'' if allow_empty else 'non-empty '}string, got {name!r}",
            name=name
        )


def _check_callback(callback: object, state_name: str, kind: str) -> None:
    if not callable(callback):
        raise InvalidCallbackError(
            f"{kind} for state {state_name!r} must be callable, got {type(callback).__name__}",
            state_name=state_name,
            callback_kind=kind
        )
