"""Async mirrors of the Result combinators."""

from railyard.async_.result import AsyncResult, match_async, try_of_async, try_of_result_async

__all__ = [
    'AsyncResult',
    'match_async',
    'try_of_async',
    'try_of_result_async',
]
