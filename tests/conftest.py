"""Pytest configuration and shared fixtures for assertable tests."""

import pytest
import structlog
from hypothesis import HealthCheck, settings

import assertable._config

# isolated_config resets state once per test, not per example; checks are pure.
settings.register_profile('assertable', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('assertable')


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test from an uninitialized config and a clean environment."""
    monkeypatch.delenv('ASSERTABLE_TRACE', raising=False)
    monkeypatch.delenv('ASSERTABLE_LOG_LEVEL', raising=False)
    monkeypatch.setattr(assertable._config, '_config', None)
    assertable._config._parse_trace.cache_clear()
    yield
    structlog.reset_defaults()


@pytest.fixture
def traced() -> None:
    """Enable trace logging for the duration of a test."""
    assertable._config.init(trace=True)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from assertable import Ok

    return Ok(True)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from assertable import Err

    return Err('assumption failed')
