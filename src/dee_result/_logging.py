"""Structured logging for dee-result guard events.

Guards log events named ``<guard>.<outcome>`` (``guard.caught``,
``stream_guard.caught``). The pipeline installed by ``configure_logging``
tags each of them with the guard that emitted it, so JSON consumers can
filter on ``guard`` instead of parsing event names. Records from stdlib
loggers go through the same renderer. Nothing is configured on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'tag_guard_event',
]

LOGGER_NAME = 'dee_result'

# event name prefix -> value of the ``guard`` field
_GUARD_KINDS = {
    'guard': 'single',
    'stream_guard': 'stream',
}


def tag_guard_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:  # noqa: ARG001
    """Add ``guard='single'`` or ``guard='stream'`` to events emitted by the guards.

    Other events pass through untouched, as does an explicit ``guard`` field.
    """
    event = event_dict.get('event')
    if isinstance(event, str):
        kind = _GUARD_KINDS.get(event.partition('.')[0])
        if kind is not None:
            event_dict.setdefault('guard', kind)
    return event_dict


def _pre_chain() -> list[Processor]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route guard events (and stdlib logs) through one structlog renderer on stderr.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Guard events are emitted at DEBUG.
        json_output: If True, emit JSON lines. If False, use colored console output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            tag_guard_event,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, named ``dee_result`` unless ``name`` is given."""
    return structlog.get_logger(name or LOGGER_NAME)
