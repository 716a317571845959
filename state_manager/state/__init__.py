"""
State registry and state machine module.

Holds the named states, tracks the active state and runs the
execution/transition cycle.
"""
