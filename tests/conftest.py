"""Pytest configuration and shared fixtures."""

from typing import Callable

import pytest

from state_manager.state.machine import StateManager


@pytest.fixture
def manager() -> StateManager:
    """Fresh state manager with default configuration."""
    return StateManager()


@pytest.fixture
def flag() -> dict:
    """Mutable external flag read by callbacks, like a sensor value."""
    return {"value": 0}


@pytest.fixture
def flag_predicate(flag: dict) -> Callable[[str], bool]:
    """Predicate that is eligible only while the flag equals 1."""
    def predicate(active_state: str) -> bool:
        return flag["value"] == 1
    return predicate


@pytest.fixture
def populated_manager() -> StateManager:
    """Manager holding idle, drive and stop with succeeding actions."""
    sm = StateManager()
    for name in ("idle", "drive", "stop"):
        sm.add_state(name)
        sm.set_action(name, lambda: True)
    return sm
