"""Default configuration parameters for the state manager."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SentinelParams:
    """Built-in fallback state parameters."""
    name: str = "dummyState"                         # Reserved, not user-addable


@dataclass(frozen=True)
class LoggingParams:
    """Parameters passed through to configure_logging."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class ManagerParams:
    """State manager behaviour parameters."""
    machine_id: str = "state_manager"                # Bound into every log event
    log_runs: bool = False                           # Log each action result at DEBUG


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    sentinel: SentinelParams
    logging: LoggingParams
    manager: ManagerParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        sentinel=SentinelParams(),
        logging=LoggingParams(),
        manager=ManagerParams(),
    )
