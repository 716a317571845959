"""
Centralized logging configuration for the state manager.

Every logger in the library is a structlog logger routed through the
standard library, so one call to configure_logging (or
configure_logging_from with the loaded LoggingParams) sets the level and
rendering for all of them.
"""
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams

_BASE_PROCESSORS = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> list:
    """Assemble the structlog processor chain, renderer last."""
    processors = list(_BASE_PROCESSORS)

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        callsite = structlog.processors.CallsiteParameter
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[callsite.FILENAME, callsite.LINENO]
        ))

    processors.extend(extra_processors or ())

    renderer = (structlog.processors.JSONRenderer() if format_json
                else structlog.dev.ConsoleRenderer(colors=True))
    processors.append(renderer)

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render JSON lines instead of the console format
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add filename and line number to each event
        extra_processors: Processors inserted before the renderer
    """
    log_level = getattr(logging, level.upper())

    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=build_processors(
            format_json=format_json,
            include_timestamp=include_timestamp,
            include_caller=include_caller,
            extra_processors=extra_processors,
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from(params: LoggingParams) -> None:
    """Apply the logging section of a loaded configuration."""
    configure_logging(**asdict(params))


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a configured structlog logger instance."""
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for state machine events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the state machine subsystem context
    """
    return get_logger(name).bind(subsystem="state_machine")


def log_state_transition(
    logger: FilteringBoundLogger,
    machine_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a state transition with standardized format.

    Args:
        logger: Structlog logger instance
        machine_id: Identifier of the state manager that switched
        from_state: Name of the previously active state
        to_state: Name of the newly active state
        trigger: What caused the switch ("predicate" or "explicit")
        context: Additional context data
    """
    bound_logger = logger.bind(
        machine_id=machine_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")
