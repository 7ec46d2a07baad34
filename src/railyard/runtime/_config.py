"""Library configuration: RailyardConfig, environment detection, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from railyard.runtime._logging import configure_logging

__all__ = [
    'RailyardConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})
_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class RailyardConfig:
    """Configuration for railyard.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or colored console lines (False).
        trace: Emit debug events when exceptions are bridged or unwraps fail.
    """

    log_level: str | None = None
    json_output: bool = True
    trace: bool = False


# Global configuration (set by init() or lazily by get_config())
_config: RailyardConfig | None = None


def _detect_log_level() -> str | None:
    """Read RAILYARD_LOG_LEVEL, ignoring unknown levels."""
    raw = os.environ.get('RAILYARD_LOG_LEVEL', '').strip().upper()
    if not raw:
        return None
    if raw not in _LEVELS:
        logging.warning("Unknown RAILYARD_LOG_LEVEL value '%s', ignoring", raw)
        return None
    return raw


def _detect_json_output() -> bool:
    """Read RAILYARD_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    raw = os.environ.get('RAILYARD_LOG_FORMAT', '').strip().lower()
    if raw == 'console':
        return False
    if raw and raw != 'json':
        logging.warning("Unknown RAILYARD_LOG_FORMAT value '%s', defaulting to json", raw)
    return True


def _detect_trace() -> bool:
    """Read RAILYARD_TRACE as a boolean flag."""
    raw = os.environ.get('RAILYARD_TRACE', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw and raw not in _FALSY:
        logging.warning("Unknown RAILYARD_TRACE value '%s', tracing disabled", raw)
    return False


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace: bool | None = None,
) -> RailyardConfig:
    """Initialize railyard with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Detected from the
            environment if None; None after detection means logging is not configured.
        json_output: JSON or console rendering. Detected if None.
        trace: Emit bridging/unwrap debug events. Detected if None.

    Returns:
        The RailyardConfig that was set.

    Raises:
        ValueError: If an explicit log_level is not a known level name.

    Example:
        ```python
        from railyard.runtime import init

        # Everything from RAILYARD_* environment variables
        init()

        # Explicit configuration
        init('DEBUG', json_output=False, trace=True)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.strip().upper()
        if resolved_level not in _LEVELS:
            msg = f"Unknown log level '{log_level}', expected one of {', '.join(sorted(_LEVELS))}"
            raise ValueError(msg)

    _config = RailyardConfig(
        log_level=resolved_level,
        json_output=_detect_json_output() if json_output is None else json_output,
        trace=_detect_trace() if trace is None else trace,
    )

    if _config.log_level is not None:
        configure_logging(_config)

    return _config


def get_config() -> RailyardConfig:
    """Get the current configuration, building it from the environment on first use.

    Unlike init(), lazy detection never reconfigures logging.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = RailyardConfig(
            log_level=_detect_log_level(),
            json_output=_detect_json_output(),
            trace=_detect_trace(),
        )
    return _config
