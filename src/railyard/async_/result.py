"""AsyncResult type for async-aware Result operations.

AsyncResult wraps an Awaitable[Result[S, E]] and mirrors every Result combinator,
so a chain keeps its shape when a step becomes asynchronous:

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .bind(validate_user)
        .map_async(load_profile)
        .on_error(report)
    )
    ```

Each step awaits the previous one before invoking its callback, so within one
chain callbacks never overlap.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from railyard._trace import trace_bridged
from railyard.result import DEFAULT_EXCEPTIONS, Failure, Result, Success

__all__ = [
    'AsyncResult',
    'match_async',
    'try_of_async',
    'try_of_result_async',
]


class AsyncResult[S, E]:
    """Async-aware Result wrapper for composing async Result operations.

    AsyncResult holds an Awaitable[Result[S, E]]. Its methods return new
    AsyncResult instances, building up a chain that only executes when awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        multiple times will raise RuntimeError. Wrap a Task/Future for
        multi-await scenarios.

    Note:
        Cancellation of the wrapped awaitable propagates through the chain;
        no later callback runs.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[S, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[S, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[S, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_success(cls, value: S) -> AsyncResult[S, E]:
        """Create an AsyncResult containing Success(value)."""

        async def _success() -> Result[S, E]:
            return Success(value)

        return cls(_success())

    @classmethod
    def from_failure(cls, error: E) -> AsyncResult[S, E]:
        """Create an AsyncResult containing Failure(error)."""

        async def _failure() -> Result[S, E]:
            return Failure(error)

        return cls(_failure())

    @classmethod
    def from_result(cls, result: Result[S, E]) -> AsyncResult[S, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[S, E]:
            return result

        return cls(_result())

    def _then[S2, E2](self, step: Callable[[Result[S, E]], Result[S2, E2]]) -> AsyncResult[S2, E2]:
        """Apply a synchronous step once the current Result has settled."""

        async def _stepped() -> Result[S2, E2]:
            return step(await self._awaitable)

        return AsyncResult(_stepped())

    def _then_async[S2, E2](
        self, step: Callable[[Result[S, E]], Awaitable[Result[S2, E2]]]
    ) -> AsyncResult[S2, E2]:
        """Apply an asynchronous step once the current Result has settled."""

        async def _stepped() -> Result[S2, E2]:
            return await step(await self._awaitable)

        return AsyncResult(_stepped())

    # --- map family ---

    def map[U](self, f: Callable[[S], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Success value.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_success(5).map(lambda x: x * 2)
                assert result == Success(10)
            ```
        """
        return self._then(lambda r: r.map(f))

    def map_async[U](self, f: Callable[[S], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Success value.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            async def example():
                result = await AsyncResult.from_success(5).map_async(double)
                assert result == Success(10)
            ```
        """
        return self._then_async(lambda r: r.map_async(f))

    def map_error(self, f: Callable[[E], S]) -> AsyncResult[S, E]:
        """Recover a Failure into Success(f(error))."""
        return self._then(lambda r: r.map_error(f))

    def map_try[U](self, attempt: Callable[[S], U], recover: Callable[[Exception], E]) -> AsyncResult[U, E]:
        """Sync guarded transform of the Success value."""
        return self._then(lambda r: r.map_try(attempt, recover))

    def map_try_async[U](
        self,
        attempt: Callable[[S], Awaitable[U]],
        recover: Callable[[Exception], Awaitable[E]],
    ) -> AsyncResult[U, E]:
        """Async guarded transform of the Success value."""
        return self._then_async(lambda r: r.map_try_async(attempt, recover))

    # --- bind family ---

    def bind[U](self, f: Callable[[S], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain with a sync function that returns a Result.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Success(x) if x > 0 else Failure('not positive')

            async def example():
                result = await AsyncResult.from_success(5).bind(validate)
                assert result == Success(5)
            ```
        """
        return self._then(lambda r: r.bind(f))

    def bind_async[U](self, f: Callable[[S], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result."""
        return self._then_async(lambda r: r.bind_async(f))

    def bind_error[F](self, f: Callable[[E], Result[S, F]]) -> AsyncResult[S, F]:
        """Recover from a Failure with a sync function returning a Result."""
        return self._then(lambda r: r.bind_error(f))

    def bind_error_async[F](self, f: Callable[[E], Awaitable[Result[S, F]]]) -> AsyncResult[S, F]:
        """Recover from a Failure with an async function returning a Result."""
        return self._then_async(lambda r: r.bind_error_async(f))

    def bind_try[U](
        self,
        attempt: Callable[[S], Result[U, E]],
        recover: Callable[[Exception], Result[U, E]],
    ) -> AsyncResult[U, E]:
        """Sync guarded chain."""
        return self._then(lambda r: r.bind_try(attempt, recover))

    def bind_try_async[U](
        self,
        attempt: Callable[[S], Awaitable[Result[U, E]]],
        recover: Callable[[Exception], Awaitable[Result[U, E]]],
    ) -> AsyncResult[U, E]:
        """Async guarded chain."""
        return self._then_async(lambda r: r.bind_try_async(attempt, recover))

    # --- hooks ---

    def on_success(self, f: Callable[[S], Any]) -> AsyncResult[S, E]:
        """Run a sync side effect on the Success value."""
        return self._then(lambda r: r.on_success(f))

    def on_success_async(self, f: Callable[[S], Awaitable[Any]]) -> AsyncResult[S, E]:
        """Await a side effect on the Success value before resolving."""
        return self._then_async(lambda r: r.on_success_async(f))

    def on_success_try(self, f: Callable[[S], Any], recover: Callable[[Exception], E]) -> AsyncResult[S, E]:
        """Run a guarded sync side effect on the Success value."""
        return self._then(lambda r: r.on_success_try(f, recover))

    def on_error(self, f: Callable[[E], Any]) -> AsyncResult[S, E]:
        """Run a sync side effect on the Failure's error."""
        return self._then(lambda r: r.on_error(f))

    def on_error_async(self, f: Callable[[E], Awaitable[Any]]) -> AsyncResult[S, E]:
        """Await a side effect on the Failure's error before resolving."""
        return self._then_async(lambda r: r.on_error_async(f))

    # --- terminal ---

    async def match[R](self, on_success: Callable[[S], R], on_error: Callable[[E], R]) -> R:
        """Await the Result and reduce it with sync callbacks."""
        result = await self._awaitable
        return result.match(on_success, on_error)

    async def match_async[R](
        self,
        on_success: Callable[[S], Awaitable[R]],
        on_error: Callable[[E], Awaitable[R]],
    ) -> R:
        """Await the Result and reduce it with async callbacks."""
        result = await self._awaitable
        return await result.match_async(on_success, on_error)

    async def expect(
        self,
        cause: BaseException | None = None,
        *,
        msg: str | None = None,
        expected: type[Any] | None = None,
    ) -> S:
        """Await the Result and force unwrap it.

        Raises:
            UnwrappedFailure: If the Result is a Failure.
        """
        result = await self._awaitable
        return result.expect(cause, msg=msg, expected=expected)

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'


# ---------------------------------------------------------------------
# Free functions
# ---------------------------------------------------------------------


async def match_async[S, E, R](
    source: Result[S, E] | Awaitable[Result[S, E]],
    on_success: Callable[[S], Awaitable[R]],
    on_error: Callable[[E], Awaitable[R]],
) -> R:
    """Reduce a Result, or a pending Result, with async callbacks.

    Args:
        source: A Result or an awaitable producing one.
        on_success: Awaited with the value if the Result is a Success.
        on_error: Awaited with the error if the Result is a Failure.

    Returns:
        R: Whatever the selected callback produced.
    """
    result = source if isinstance(source, Success | Failure) else await source
    return await result.match_async(on_success, on_error)


def try_of_async[S, E](
    attempt: Callable[[], Awaitable[S]],
    recover: Callable[[Exception], Awaitable[E]],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> AsyncResult[S, E]:
    """Await ``attempt`` and convert a raised exception into a Failure.

    Only awaiting ``attempt`` is guarded; exceptions raised by ``recover``
    propagate when the AsyncResult is awaited.

    Args:
        attempt: Zero-argument async callable that may raise.
        recover: Async callable mapping the intercepted exception to an error payload.
        exceptions: Exception types to intercept. Defaults to (Exception,).

    Returns:
        AsyncResult[S, E]: Pending Success(value) or Failure(error).
    """

    async def _tried() -> Result[S, E]:
        try:
            value = await attempt()
        except exceptions as e:
            trace_bridged('try_of_async', e)
            return Failure(await recover(e))  # type: ignore[arg-type]
        return Success(value)

    return AsyncResult(_tried())


def try_of_result_async[S, E](
    attempt: Callable[[], Awaitable[Result[S, E]]],
    recover: Callable[[Exception], Awaitable[Result[S, E]]],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> AsyncResult[S, E]:
    """Like ``try_of_async`` for an ``attempt`` that already returns a Result."""

    async def _tried() -> Result[S, E]:
        try:
            return await attempt()
        except exceptions as e:
            trace_bridged('try_of_result_async', e)
            return await recover(e)  # type: ignore[arg-type]

    return AsyncResult(_tried())

