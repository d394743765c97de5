"""Pytest configuration and shared fixtures for dee-result tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import HealthCheck, settings

import dee_result

# clean_config resets process state only; hypothesis examples may share one run of it
settings.register_profile('dee-result', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('dee-result')


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without installed configuration or DEE_RESULT_* overrides."""
    for name in (
        'DEE_RESULT_LOG_LEVEL',
        'DEE_RESULT_LOG_FAILURES',
        'DEE_RESULT_CAPTURE_TRACEBACK',
        'DEE_RESULT_JSON_LOGS',
    ):
        monkeypatch.delenv(name, raising=False)
    dee_result.reset()
    yield
    dee_result.reset()
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restore the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from dee_result import Left

    return Left('test error')


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from dee_result import Right

    return Right(42)
