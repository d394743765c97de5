"""Guard configuration: GuardConfig, initialization and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dee_result._logging import configure_logging

__all__ = [
    'GuardConfig',
    'get_config',
    'init',
    'reset',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class GuardConfig:
    """Configuration for dee-result guards.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        log_failures: Emit a debug event when a guard converts an exception.
        capture_traceback: Record the formatted traceback in GuardError.
        json_output: Render logs as JSON (False = colored console output).
    """

    log_level: str | None = None
    log_failures: bool = False
    capture_traceback: bool = False
    json_output: bool = True


# Global configuration (set by init())
_config: GuardConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, falling back to ``default``."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _detect_log_level() -> str | None:
    level = os.environ.get('DEE_RESULT_LOG_LEVEL', '').strip().upper()
    return level or None


def init(
    log_level: str | None = None,
    *,
    log_failures: bool | None = None,
    capture_traceback: bool | None = None,
    json_output: bool | None = None,
) -> GuardConfig:
    """Initialize dee-result with the given configuration.

    Arguments left as None are read from the environment:
    ``DEE_RESULT_LOG_LEVEL``, ``DEE_RESULT_LOG_FAILURES``,
    ``DEE_RESULT_CAPTURE_TRACEBACK`` and ``DEE_RESULT_JSON_LOGS``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        log_failures: Emit a debug event for each exception a guard converts.
        capture_traceback: Record tracebacks in GuardError payloads.
        json_output: Render logs as JSON.

    Returns:
        The GuardConfig that was set.

    Example:
        ```python
        import dee_result

        dee_result.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = GuardConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        log_failures=(
            log_failures if log_failures is not None else _env_flag('DEE_RESULT_LOG_FAILURES', default=False)
        ),
        capture_traceback=(
            capture_traceback
            if capture_traceback is not None
            else _env_flag('DEE_RESULT_CAPTURE_TRACEBACK', default=False)
        ),
        json_output=json_output if json_output is not None else _env_flag('DEE_RESULT_JSON_LOGS', default=True),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> GuardConfig:
    """Get the current configuration.

    When ``init()`` has not been called, a configuration is resolved from the
    environment on each call, without touching logging.
    """
    if _config is None:
        return GuardConfig(
            log_level=_detect_log_level(),
            log_failures=_env_flag('DEE_RESULT_LOG_FAILURES', default=False),
            capture_traceback=_env_flag('DEE_RESULT_CAPTURE_TRACEBACK', default=False),
            json_output=_env_flag('DEE_RESULT_JSON_LOGS', default=True),
        )
    return _config


def reset() -> None:
    """Forget the configuration installed by ``init()``."""
    global _config  # noqa: PLW0603
    _config = None
