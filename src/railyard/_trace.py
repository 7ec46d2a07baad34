"""Debug events for the bridging combinators and forced extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from railyard.runtime._config import get_config
from railyard.runtime._logging import get_logger

if TYPE_CHECKING:
    from railyard.errors import UnwrappedFailure

__all__ = ['trace_bridged', 'trace_unwrap']


def _safe_str(exc: BaseException) -> str:
    # runs inside the bridging except block, so it must never raise
    try:
        return str(exc)
    except Exception:
        return f'<unprintable {type(exc).__qualname__}>'


def trace_bridged(combinator: str, exc: BaseException) -> None:
    """Record that ``combinator`` converted ``exc`` into the typed error channel."""
    if not get_config().trace:
        return
    get_logger().debug(
        'exception_bridged',
        combinator=combinator,
        exc_type=type(exc).__qualname__,
        exc_message=_safe_str(exc),
    )


def trace_unwrap(failure: UnwrappedFailure) -> None:
    """Record a failed ``expect()`` before it is raised."""
    if not get_config().trace:
        return
    get_logger().debug('unwrap_failed', failure=failure.to_struct())
