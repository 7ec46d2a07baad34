"""@attempt and @attempt_async decorators bridging raising functions into Results."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from railyard._trace import trace_bridged
from railyard.result import DEFAULT_EXCEPTIONS, Failure, Result, Success

__all__ = ['attempt', 'attempt_async']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E')


@overload
def attempt[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def attempt[E](
    func: None = None,
    *,
    recover: Callable[[Exception], E] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]: ...


def attempt[**P, T](
    func: Callable[P, T] | None = None,
    *,
    recover: Callable[[Exception], Any] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator form of ``try_of``.

    Wraps a function so that it returns Success(value) on normal return and
    Failure(recover(exc)) if an intercepted exception is raised. Without
    ``recover`` the exception itself becomes the error payload.

    Can be used with or without arguments:
        @attempt
        def risky(): ...

        @attempt(recover=str, exceptions=(ValueError,))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        recover: Maps the intercepted exception to an error payload.
        exceptions: Tuple of exception types to intercept. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @attempt
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(5.0)
        divide(10, 0)
        # Failure(ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            trace_bridged('attempt', e)
            return Failure(recover(e) if recover is not None else e)  # type: ignore[arg-type]
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def attempt_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def attempt_async[E](
    func: None = None,
    *,
    recover: Callable[[Exception], Awaitable[E]] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, E]]]]: ...


def attempt_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    recover: Callable[[Exception], Awaitable[Any]] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator form of ``try_of_async``.

    The recovery callback, when given, is async and awaited. Exceptions raised
    by it propagate.

    Example:
        ```python
        @attempt_async(exceptions=(OSError,))
        async def fetch(url: str) -> bytes:
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        try:
            value = await wrapped(*args, **kwargs)
        except catch as e:
            trace_bridged('attempt_async', e)
            return Failure(await recover(e) if recover is not None else e)  # type: ignore[arg-type]
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper
