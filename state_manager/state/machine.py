"""
State manager: active state tracking, execution and transitions.

The active state is tracked by name and resolved through the registry on
every access, falling back to the sentinel when the name is no longer a
member. All domain failures (duplicate name, unknown name, no eligible
successor) are reported as False and leave the manager untouched.

Not thread-safe: callers driving one manager from several threads must
serialize every call themselves.
"""

from typing import Iterator, Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..logging.config import configure_logging_from, get_state_logger, log_state_transition
from .models import Action, State, TransitionPredicate
from .registry import StateRegistry
from .transitions import select_successor

state_logger = get_state_logger(__name__)


class StateManager:
    """Registry of named states with a single active state."""

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.machine_id = self.config.manager.machine_id
        self.log_runs = self.config.manager.log_runs
        self.logger = state_logger.bind(machine_id=self.machine_id)

        self._registry = StateRegistry(self.config.sentinel.name)
        self._active_name = self._registry.sentinel.name

    @classmethod
    def from_config(cls, config: DefaultConfig) -> "StateManager":
        """Create a manager from a loaded configuration, applying its logging section."""
        configure_logging_from(config.logging)
        return cls(config=config)

    # Introspection

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[State]:
        return iter(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    @property
    def states(self) -> tuple[State, ...]:
        """Registered states in insertion order."""
        return self._registry.states

    @property
    def state_names(self) -> tuple[str, ...]:
        return self._registry.names

    @property
    def sentinel_name(self) -> str:
        return self._registry.sentinel.name

    @property
    def active_state(self) -> State:
        """The active state, or the sentinel if the active name is gone."""
        state = self._registry.lookup(self._active_name)
        if state is None:
            return self._registry.sentinel
        return state

    @property
    def active_state_name(self) -> str:
        return self.active_state.name

    def get_active_state_name(self) -> str:
        """Name of the active state (the sentinel's name if none is active)."""
        return self.active_state_name

    def get_state(self, name: str) -> Optional[State]:
        """Look up a registered state by name."""
        return self._registry.lookup(name)

    # Registry

    def add_state(self, name: str) -> bool:
        """
        Add a state with always-fail action and predicate.

        Returns:
            True if added, False if the name exists or is reserved
        """
        if not self._registry.add(name):
            reason = "reserved" if self._registry.is_reserved(name) else "duplicate"
            self.logger.debug("State not added", state=name, reason=reason)
            return False

        self.logger.debug("State added", state=name, size=len(self._registry))
        return True

    def remove_state(self, name: str) -> bool:
        """
        Remove a state.

        Removing the active state makes the sentinel active. Removing the
        last state puts the sentinel back as the only member.

        Returns:
            True if removed, False if not found
        """
        was_active = name == self.active_state_name

        if not self._registry.remove(name):
            self.logger.debug("State not removed", state=name, reason="not_found")
            return False

        self.logger.debug("State removed", state=name, size=len(self._registry))

        if was_active:
            self._activate(self._registry.sentinel, trigger="removal", from_state=name)

        return True

    def set_action(self, name: str, action: Action) -> bool:
        """
        Set the function called when the state is active.

        Returns:
            True if set, False if the state was not found
        """
        if not self._registry.set_action(name, action):
            self.logger.debug("Action not set", state=name, reason="not_found")
            return False
        return True

    def set_transition_predicate(self, name: str, predicate: TransitionPredicate) -> bool:
        """
        Set the function deciding whether the state should become active.

        The predicate receives the active state's name.

        Returns:
            True if set, False if the state was not found
        """
        if not self._registry.set_predicate(name, predicate):
            self.logger.debug("Transition predicate not set", state=name, reason="not_found")
            return False
        return True

    # Execution

    def run(self, with_transition: bool = False) -> bool:
        """
        Run the active state's action, then optionally transition.

        Args:
            with_transition: Also switch to the first state that wants to
                become active

        Returns:
            The action's result, whether or not a transition happened
        """
        state = self.active_state
        result = state.execute()

        if self.log_runs:
            self.logger.debug("State executed", state=state.name, result=result)

        if with_transition:
            self.transition()

        return result

    # Transitions

    def transition(self, name: Optional[str] = None) -> bool:
        """
        Switch the active state.

        Without a name, the first state in insertion order (other than the
        active one) whose predicate accepts the active state's name becomes
        active. With a name, that state becomes active unconditionally.

        Returns:
            True if a state was switched to, False if no state was eligible
            or the named state does not exist
        """
        if name is not None:
            return self._transition_to(name)

        active_name = self.active_state_name
        successor = select_successor(self._registry, active_name)

        if successor is None:
            self.logger.debug(
                "No eligible successor",
                active_state=active_name,
                reason="no_eligible_successor"
            )
            return False

        self._activate(successor, trigger="predicate")
        return True

    def _transition_to(self, name: str) -> bool:
        state = self._registry.lookup(name)

        if state is None:
            self.logger.debug("Transition target not found", state=name, reason="not_found")
            return False

        self._activate(state, trigger="explicit")
        return True

    def _activate(self, state: State, trigger: str, from_state: Optional[str] = None) -> None:
        if from_state is None:
            from_state = self.active_state_name
        self._active_name = state.name

        if from_state != state.name:
            log_state_transition(
                self.logger,
                machine_id=self.machine_id,
                from_state=from_state,
                to_state=state.name,
                trigger=trigger,
            )
