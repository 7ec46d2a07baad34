"""Structured logging for railyard's trace events.

Uses structlog's ProcessorFormatter so railyard events and the host application's
stdlib records share one format. Diagnostic structs such as UnwrappedFailureInfo
are rendered as plain mappings.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec
import structlog

if TYPE_CHECKING:
    from railyard.runtime._config import RailyardConfig

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'railyard'


def _render_structs(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Turn msgspec Struct values into builtins so every renderer can encode them."""
    for key, value in event_dict.items():
        if isinstance(value, msgspec.Struct):
            event_dict[key] = msgspec.to_builtins(value)
    return event_dict


def _get_shared_processors() -> list[Any]:
    """Processors shared between structlog events and stdlib foreign records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _render_structs,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(config: RailyardConfig) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        config: Supplies the level (INFO when unset) and JSON or console rendering.
    """
    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(config.json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level or 'INFO')


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger, named ``railyard`` unless told otherwise."""
    return structlog.get_logger(name)
