"""Decorators: @attempt and @attempt_async."""

from railyard.decorators.attempt import attempt, attempt_async

__all__ = [
    'attempt',
    'attempt_async',
]
