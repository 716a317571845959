#!/usr/bin/env python3
"""
Basic Usage Example - State Manager

Runs the smallest useful control loop: one state whose action succeeds
only once an external flag is raised, and whose predicate always asks to
become active. Prints the result of each run(True) call.

Run: python examples/basic_usage.py
"""

from state_manager import StateManager
from state_manager.logging import configure_logging

flag = {"value": 0}


def cond() -> bool:
    return flag["value"] == 1


def always(active_state: str) -> bool:
    return True


def main() -> None:
    configure_logging(level="INFO")

    manager = StateManager()

    print(f"run(True) on empty manager: {manager.run(True)}")

    manager.add_state("state1")
    manager.set_action("state1", cond)
    manager.set_transition_predicate("state1", always)

    print(f"run(True) with flag down:   {manager.run(True)}")
    print(f"run(True) with flag down:   {manager.run(True)}")

    flag["value"] = 1

    print(f"run(True) with flag up:     {manager.run(True)}")
    print(f"Active state: {manager.get_active_state_name()}")


if __name__ == "__main__":
    main()
