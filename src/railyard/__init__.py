"""railyard: explicit Success/Failure results for Python 3.13+.

A Result holds exactly one success value or exactly one error value. Combinators
thread it through synchronous and asynchronous call chains without using
exceptions for ordinary control flow.

Flat imports (preferred):
    from railyard import Result, Success, Failure, of_success, of_failure, try_of
    from railyard import AsyncResult, try_of_async, attempt

Submodule imports (for organization):
    from railyard.result import Success, Failure, Result
    from railyard.async_ import AsyncResult
    from railyard.decorators import attempt, attempt_async
    from railyard.runtime import init, get_config
"""

# Async
from railyard.async_ import AsyncResult, match_async, try_of_async, try_of_result_async

# Decorators
from railyard.decorators import attempt, attempt_async

# Errors
from railyard.errors import UnwrappedFailure, UnwrappedFailureInfo
from railyard.result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
    of_failure,
    of_success,
    try_of,
    try_of_result,
)

__all__ = [
    # Async
    'AsyncResult',
    # Result types
    'Failure',
    'Result',
    'Success',
    # Errors
    'UnwrappedFailure',
    'UnwrappedFailureInfo',
    # Decorators
    'attempt',
    'attempt_async',
    # Guards
    'is_failure',
    'is_success',
    'match_async',
    # Construction
    'of_failure',
    'of_success',
    # Bridging
    'try_of',
    'try_of_async',
    'try_of_result',
    'try_of_result_async',
]
