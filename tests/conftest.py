"""Pytest configuration and shared fixtures for railyard tests."""

from __future__ import annotations

import pytest
import structlog

import railyard.runtime._config as config_module


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from railyard import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from railyard import Failure

    return Failure('test error')


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test without a cached config, RAILYARD_* variables or structlog setup."""
    for name in ('RAILYARD_LOG_LEVEL', 'RAILYARD_LOG_FORMAT', 'RAILYARD_TRACE'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, '_config', None)
    yield
    structlog.reset_defaults()
