#!/usr/bin/env python3
"""
State Machine Demo - State Manager

Drives a small robot mode cycle IDLE -> DRIVE -> STOP -> IDLE using
predicates that route on the active state's name and on a simulated
obstacle sensor. Shows removal of the active state falling back to the
sentinel.

Run: python examples/state_machine_demo.py
"""

from state_manager import StateManager
from state_manager.logging import configure_logging


class Robot:
    """Simulated robot with an obstacle sensor."""

    def __init__(self):
        self.tick = 0
        self.obstacle = False

    def idle(self) -> bool:
        return True

    def drive(self) -> bool:
        self.tick += 1
        self.obstacle = self.tick % 3 == 0
        return not self.obstacle

    def stop(self) -> bool:
        self.obstacle = False
        return True


def main() -> None:
    configure_logging(level="INFO")

    robot = Robot()
    manager = StateManager()

    for name, action in (("idle", robot.idle), ("drive", robot.drive), ("stop", robot.stop)):
        manager.add_state(name)
        manager.set_action(name, action)

    manager.set_transition_predicate("drive", lambda active: active == "idle")
    manager.set_transition_predicate("stop", lambda active: active == "drive" and robot.obstacle)
    manager.set_transition_predicate("idle", lambda active: active == "stop")

    manager.transition("idle")

    print("📊 STATE CYCLE")
    print("=" * 50)
    for step in range(8):
        active = manager.get_active_state_name()
        result = manager.run(True)
        print(f"  step {step}: ran {active:<6} result={result} -> {manager.get_active_state_name()}")

    print("\n🗑  Removing the active state")
    active = manager.get_active_state_name()
    manager.remove_state(active)
    print(f"  removed {active}, active is now {manager.get_active_state_name()}")
    print(f"  run() -> {manager.run()}")


if __name__ == "__main__":
    main()
