"""Runtime support: configuration and structured logging."""

from railyard.runtime._config import RailyardConfig, get_config, init
from railyard.runtime._logging import LOGGER_NAME, configure_logging, get_logger

__all__ = [
    'LOGGER_NAME',
    'RailyardConfig',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
]
