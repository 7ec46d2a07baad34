"""Two-variant Result type with a combinator library.

A ``Result[S, E]`` is either ``Success(value)`` or ``Failure(error)``. Combinators
branch on the variant: success-path combinators only call their callback on a
Success and hand a Failure through untouched, error-path combinators do the
opposite. Exceptions are only turned into Failures by the ``*_try`` combinators
and ``try_of``; everywhere else they propagate.

Example:
    ```python
    from railyard.result import of_success, of_failure, try_of

    of_success(4).map(lambda x: x * 2)
    # Success(8)

    of_failure('bad').bind(lambda x: of_success(x + 1))
    # Failure('bad')

    try_of(lambda: 1 / 0, lambda e: f'caught:{e}')
    # Failure('caught:division by zero')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs

from railyard._trace import trace_bridged, trace_unwrap
from railyard.errors import UnwrappedFailure

if TYPE_CHECKING:
    from railyard.async_.result import AsyncResult

__all__ = [
    'Failure',
    'Result',
    'Success',
    'is_failure',
    'is_success',
    'of_failure',
    'of_success',
    'try_of',
    'try_of_result',
]

# BaseException-only signals such as cancellation always propagate.
DEFAULT_EXCEPTIONS: tuple[type[BaseException], ...] = (Exception,)


def _lift[S, E](awaitable: Awaitable[Result[S, E]]) -> AsyncResult[S, E]:
    from railyard.async_.result import AsyncResult  # noqa: PLC0415 - circular

    return AsyncResult(awaitable)


async def _settled[S, E](result: Result[S, E]) -> Result[S, E]:
    return result


class _ResultBase:
    """Behaviour shared by both variants."""

    __slots__ = ()

    # forbid truthiness to avoid 'if r:' footguns
    def __bool__(self) -> Never:
        raise TypeError('Result has no truth value; use .is_success() / .is_failure().')

    def try_apply[R](
        self,
        attempt: Callable[[Any], R],
        catch: Callable[[Any], R],
        *,
        exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
    ) -> R:
        """Run ``attempt(self)`` and hand intercepted exceptions to ``catch``.

        Only exceptions matching ``exceptions`` are intercepted; exceptions raised
        by ``catch`` itself propagate.

        Args:
            attempt: Callable receiving this Result.
            catch: Callable receiving the intercepted exception.
            exceptions: Exception types to intercept. Defaults to (Exception,).

        Returns:
            R: Whatever ``attempt`` or ``catch`` returned.
        """
        try:
            return attempt(self)
        except exceptions as e:
            trace_bridged('try_apply', e)
            return catch(e)


# ---------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Success[S](_ResultBase):
    """Successful outcome holding a value of type S.

    Attributes:
        value: The success payload.
    """

    value: S
    __match_args__ = ('value',)

    def is_success(self) -> bool:
        """Return True, indicating this is a successful result."""
        return True

    def is_failure(self) -> bool:
        """Return False, indicating this is not a failed result."""
        return False

    def guard_success(self) -> tuple[bool, S, None]:
        """Discriminant plus both slots; the error slot is None.

        Returns:
            tuple[bool, S, None]: ``(True, value, None)``.
        """
        return True, self.value, None

    def guard_failure(self) -> tuple[bool, S, None]:
        """Discriminant plus both slots; the error slot is None.

        Returns:
            tuple[bool, S, None]: ``(False, value, None)``.
        """
        return False, self.value, None

    # --- map family ---

    def map[U](self, f: Callable[[S], U]) -> Success[U]:
        """Transform the value.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Success[U]: A new Success containing the transformed value.
        """
        return Success(f(self.value))

    def map_async[U](self, f: Callable[[S], Awaitable[U]]) -> AsyncResult[U, Any]:
        """Transform the value with an async function.

        Returns:
            AsyncResult[U, Any]: Pending Success of the awaited value.
        """

        async def _mapped() -> Result[U, Any]:
            return Success(await f(self.value))

        return _lift(_mapped())

    def map_error(self, f: Callable[[Any], S]) -> Success[S]:
        """Recover a Failure into a Success (no-op for Success).

        Returns:
            Success[S]: Returns self unchanged.
        """
        return self

    def map_try[U, E](self, attempt: Callable[[S], U], recover: Callable[[Exception], E]) -> Result[U, E]:
        """Transform the value, converting a raised exception into a Failure.

        Args:
            attempt: Transform that may raise.
            recover: Maps the intercepted exception to an error payload.

        Returns:
            Result[U, E]: Success of the transformed value, or Failure(recover(exc)).
        """
        try:
            value = attempt(self.value)
        except Exception as e:
            trace_bridged('map_try', e)
            return Failure(recover(e))
        return Success(value)

    def map_try_async[U, E](
        self,
        attempt: Callable[[S], Awaitable[U]],
        recover: Callable[[Exception], Awaitable[E]],
    ) -> AsyncResult[U, E]:
        """Async ``map_try``: both callbacks are awaited."""

        async def _mapped() -> Result[U, E]:
            try:
                value = await attempt(self.value)
            except Exception as e:
                trace_bridged('map_try_async', e)
                return Failure(await recover(e))
            return Success(value)

        return _lift(_mapped())

    # --- bind family ---

    def bind[U, E](self, f: Callable[[S], Result[U, E]]) -> Result[U, E]:
        """Chain a computation that may fail.

        Args:
            f: A callable that takes the value and returns a Result.

        Returns:
            Result[U, E]: The Result returned by f.
        """
        return f(self.value)

    def bind_async[U, E](self, f: Callable[[S], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain an async computation that may fail."""

        async def _bound() -> Result[U, E]:
            return await f(self.value)

        return _lift(_bound())

    def bind_error[F](self, f: Callable[[Any], Result[S, F]]) -> Success[S]:
        """Handle the error case (no-op for Success)."""
        return self

    def bind_error_async[F](self, f: Callable[[Any], Awaitable[Result[S, F]]]) -> AsyncResult[S, F]:
        """Async ``bind_error`` (resolves to self without calling f)."""
        return _lift(_settled(self))

    def bind_try[U, E](
        self,
        attempt: Callable[[S], Result[U, E]],
        recover: Callable[[Exception], Result[U, E]],
    ) -> Result[U, E]:
        """Chain a computation, converting a raised exception via ``recover``.

        Args:
            attempt: Callable returning a Result; may raise.
            recover: Maps the intercepted exception to a Result.

        Returns:
            Result[U, E]: The Result of attempt, or of recover if attempt raised.
        """
        try:
            return attempt(self.value)
        except Exception as e:
            trace_bridged('bind_try', e)
            return recover(e)

    def bind_try_async[U, E](
        self,
        attempt: Callable[[S], Awaitable[Result[U, E]]],
        recover: Callable[[Exception], Awaitable[Result[U, E]]],
    ) -> AsyncResult[U, E]:
        """Async ``bind_try``: both callbacks are awaited."""

        async def _bound() -> Result[U, E]:
            try:
                return await attempt(self.value)
            except Exception as e:
                trace_bridged('bind_try_async', e)
                return await recover(e)

        return _lift(_bound())

    # --- hooks ---

    def on_success(self, f: Callable[[S], Any]) -> Success[S]:
        """Call f with the value for side effects.

        Returns:
            Success[S]: Returns self unchanged.
        """
        f(self.value)
        return self

    def on_success_async(self, f: Callable[[S], Awaitable[Any]]) -> AsyncResult[S, Any]:
        """Await f(value) for side effects, then resolve to self."""

        async def _inspected() -> Result[S, Any]:
            await f(self.value)
            return self

        return _lift(_inspected())

    def on_success_try[E](self, f: Callable[[S], Any], recover: Callable[[Exception], E]) -> Result[S, E]:
        """Call f for side effects; a raised exception becomes Failure(recover(exc)).

        Returns:
            Result[S, E]: self if f returned normally.
        """
        try:
            f(self.value)
        except Exception as e:
            trace_bridged('on_success_try', e)
            return Failure(recover(e))
        return self

    def on_error(self, f: Callable[[Any], Any]) -> Success[S]:
        """Call f with the error for side effects (no-op for Success)."""
        return self

    def on_error_async(self, f: Callable[[Any], Awaitable[Any]]) -> AsyncResult[S, Any]:
        """Async ``on_error`` (resolves to self without calling f)."""
        return _lift(_settled(self))

    # --- reduction ---

    def match[R](self, on_success: Callable[[S], R], on_error: Callable[[Any], R]) -> R:
        """Reduce to a single value; calls on_success."""
        return on_success(self.value)

    async def match_async[R](
        self,
        on_success: Callable[[S], Awaitable[R]],
        on_error: Callable[[Any], Awaitable[R]],
    ) -> R:
        """Reduce to a single value; awaits on_success."""
        return await on_success(self.value)

    # --- extraction ---

    def expect(
        self,
        cause: BaseException | None = None,
        *,
        msg: str | None = None,
        expected: type[Any] | None = None,
    ) -> S:
        """Force unwrap the value.

        Args:
            cause: Exception to chain if the unwrap fails (unused for Success).
            msg: Custom error message (unused for Success).
            expected: Success type named in the error message (unused for Success).

        Returns:
            S: The contained value.
        """
        return self.value

    def __repr__(self) -> str:
        return f'Success({self.value!r})'


# ---------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Failure[E](_ResultBase):
    """Failed outcome holding an error payload of type E.

    The payload is any value; it does not have to be an exception.

    Attributes:
        error: The error payload.
    """

    error: E
    __match_args__ = ('error',)

    def is_success(self) -> bool:
        """Return False, indicating this is not a successful result."""
        return False

    def is_failure(self) -> bool:
        """Return True, indicating this is a failed result."""
        return True

    def guard_success(self) -> tuple[bool, None, E]:
        """Discriminant plus both slots; the value slot is None.

        Returns:
            tuple[bool, None, E]: ``(False, None, error)``.
        """
        return False, None, self.error

    def guard_failure(self) -> tuple[bool, None, E]:
        """Discriminant plus both slots; the value slot is None.

        Returns:
            tuple[bool, None, E]: ``(True, None, error)``.
        """
        return True, None, self.error

    # --- map family ---

    def map[U](self, f: Callable[[Any], U]) -> Failure[E]:
        """Transform the value (no-op for Failure).

        Returns:
            Failure[E]: Returns self; the error is kept under the new success type.
        """
        return self

    def map_async[U](self, f: Callable[[Any], Awaitable[U]]) -> AsyncResult[U, E]:
        """Async ``map`` (resolves to self without awaiting f)."""
        return _lift(_settled(self))

    def map_error[S](self, f: Callable[[E], S]) -> Success[S]:
        """Recover into a Success whose value is derived from the error.

        Args:
            f: A callable that takes the error and returns a success value.

        Returns:
            Success[S]: Success(f(error)).
        """
        return Success(f(self.error))

    def map_try[U](self, attempt: Callable[[Any], U], recover: Callable[[Exception], Any]) -> Failure[E]:
        """Guarded transform (no-op for Failure; neither callback runs)."""
        return self

    def map_try_async[U](
        self,
        attempt: Callable[[Any], Awaitable[U]],
        recover: Callable[[Exception], Awaitable[Any]],
    ) -> AsyncResult[U, E]:
        """Async ``map_try`` (resolves to self; neither callback runs)."""
        return _lift(_settled(self))

    # --- bind family ---

    def bind[U](self, f: Callable[[Any], Result[U, E]]) -> Failure[E]:
        """Chain a computation (short-circuits for Failure).

        Returns:
            Failure[E]: Returns self unchanged.
        """
        return self

    def bind_async[U](self, f: Callable[[Any], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Async ``bind`` (resolves to self without awaiting f)."""
        return _lift(_settled(self))

    def bind_error[S, F](self, f: Callable[[E], Result[S, F]]) -> Result[S, F]:
        """Handle the error by producing a fresh Result.

        Args:
            f: A callable that takes the error and returns a Result.

        Returns:
            Result[S, F]: The Result returned by f.
        """
        return f(self.error)

    def bind_error_async[S, F](self, f: Callable[[E], Awaitable[Result[S, F]]]) -> AsyncResult[S, F]:
        """Handle the error with an async function producing a fresh Result."""

        async def _recovered() -> Result[S, F]:
            return await f(self.error)

        return _lift(_recovered())

    def bind_try[U](
        self,
        attempt: Callable[[Any], Result[U, E]],
        recover: Callable[[Exception], Result[U, E]],
    ) -> Failure[E]:
        """Guarded chain (short-circuits for Failure)."""
        return self

    def bind_try_async[U](
        self,
        attempt: Callable[[Any], Awaitable[Result[U, E]]],
        recover: Callable[[Exception], Awaitable[Result[U, E]]],
    ) -> AsyncResult[U, E]:
        """Async ``bind_try`` (resolves to self; neither callback runs)."""
        return _lift(_settled(self))

    # --- hooks ---

    def on_success(self, f: Callable[[Any], Any]) -> Failure[E]:
        """Call f with the value for side effects (no-op for Failure)."""
        return self

    def on_success_async(self, f: Callable[[Any], Awaitable[Any]]) -> AsyncResult[Any, E]:
        """Async ``on_success`` (resolves to self without awaiting f)."""
        return _lift(_settled(self))

    def on_success_try(self, f: Callable[[Any], Any], recover: Callable[[Exception], E]) -> Failure[E]:
        """Guarded side effect (no-op for Failure)."""
        return self

    def on_error(self, f: Callable[[E], Any]) -> Failure[E]:
        """Call f with the error for side effects.

        Returns:
            Failure[E]: Returns self unchanged.
        """
        f(self.error)
        return self

    def on_error_async(self, f: Callable[[E], Awaitable[Any]]) -> AsyncResult[Any, E]:
        """Await f(error) for side effects, then resolve to self."""

        async def _inspected() -> Result[Any, E]:
            await f(self.error)
            return self

        return _lift(_inspected())

    # --- reduction ---

    def match[R](self, on_success: Callable[[Any], R], on_error: Callable[[E], R]) -> R:
        """Reduce to a single value; calls on_error."""
        return on_error(self.error)

    async def match_async[R](
        self,
        on_success: Callable[[Any], Awaitable[R]],
        on_error: Callable[[E], Awaitable[R]],
    ) -> R:
        """Reduce to a single value; awaits on_error."""
        return await on_error(self.error)

    # --- extraction ---

    def expect(
        self,
        cause: BaseException | None = None,
        *,
        msg: str | None = None,
        expected: type[Any] | None = None,
    ) -> Never:
        """Force unwrap the value (always raises for Failure).

        Args:
            cause: Exception chained as the underlying cause. When omitted and the
                error payload is itself an exception, the payload is chained.
            msg: Custom error message.
            expected: Success type to name in the default message. Type parameters
                are erased at runtime, so the caller supplies it.

        Raises:
            UnwrappedFailure: Always raised for Failure instances.
        """
        if cause is None and isinstance(self.error, BaseException):
            cause = self.error
        if msg is None:
            wanted = f'a success value of type {expected.__qualname__}' if expected is not None else 'a success value'
            msg = f'Unsuccessful unwrap of result: expected {wanted}, got {self!r}'
        failure = UnwrappedFailure(msg, error_type=type(self.error), error=self.error, cause=cause)
        trace_unwrap(failure)
        if cause is not None:
            raise failure from cause
        # no explicit cause: keep any exception being handled as implicit context
        raise failure

    def __repr__(self) -> str:
        return f'Failure({self.error!r})'


# Public alias
type Result[S, E] = Success[S] | Failure[E]


# ---------------------------------------------------------------------
# Construction & guards
# ---------------------------------------------------------------------


def of_success[S](value: S) -> Success[S]:
    """Wrap a value as a Success."""
    return Success(value)


def of_failure[E](error: E) -> Failure[E]:
    """Wrap an error payload as a Failure."""
    return Failure(error)


def is_success[S, E](r: Result[S, E]) -> TypeIs[Success[S]]:
    """Type guard narrowing a Result to Success.

    Args:
        r: A Result instance.

    Returns:
        TypeIs[Success[S]]: True if r is a Success.
    """
    return isinstance(r, Success)


def is_failure[S, E](r: Result[S, E]) -> TypeIs[Failure[E]]:
    """Type guard narrowing a Result to Failure.

    Args:
        r: A Result instance.

    Returns:
        TypeIs[Failure[E]]: True if r is a Failure.
    """
    return isinstance(r, Failure)


# ---------------------------------------------------------------------
# Exception bridging
# ---------------------------------------------------------------------


def try_of[S, E](
    attempt: Callable[[], S],
    recover: Callable[[Exception], E],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> Result[S, E]:
    """Run ``attempt`` and convert a raised exception into a Failure.

    Only the ``attempt`` call is guarded. An exception raised by ``recover``
    propagates to the caller.

    Args:
        attempt: Zero-argument callable that may raise.
        recover: Maps the intercepted exception to an error payload.
        exceptions: Exception types to intercept. Defaults to (Exception,).

    Returns:
        Result[S, E]: Success(attempt()) or Failure(recover(exc)).

    Example:
        ```python
        try_of(lambda: int('42'), str)
        # Success(42)

        try_of(lambda: int('x'), lambda e: type(e).__name__)
        # Failure('ValueError')
        ```
    """
    try:
        value = attempt()
    except exceptions as e:
        trace_bridged('try_of', e)
        return Failure(recover(e))  # type: ignore[arg-type]
    return Success(value)


def try_of_result[S, E](
    attempt: Callable[[], Result[S, E]],
    recover: Callable[[Exception], Result[S, E]],
    *,
    exceptions: tuple[type[BaseException], ...] = DEFAULT_EXCEPTIONS,
) -> Result[S, E]:
    """Like ``try_of`` for an ``attempt`` that already returns a Result.

    The Result is returned as-is rather than wrapped again.

    Args:
        attempt: Zero-argument callable returning a Result; may raise.
        recover: Maps the intercepted exception to a Result.
        exceptions: Exception types to intercept. Defaults to (Exception,).

    Returns:
        Result[S, E]: attempt() or recover(exc).
    """
    try:
        return attempt()
    except exceptions as e:
        trace_bridged('try_of_result', e)
        return recover(e)  # type: ignore[arg-type]
