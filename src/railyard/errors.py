"""Forced-extraction error: dual exception+struct for raise-based and structured code."""

from __future__ import annotations

import functools
from typing import Any

import msgspec

__all__ = [
    'UnwrappedFailure',
    'UnwrappedFailureInfo',
]


class UnwrappedFailureInfo(msgspec.Struct, frozen=True, gc=False):
    """Diagnostic record of a failed unwrap - struct variant for logs and encoding."""

    message: str
    error_type: str
    cause: str | None = None

    def to_exception(self) -> UnwrappedFailure:
        """Convert to exception for raise-based code.

        The record only keeps names and reprs, so the exception carries the type
        name as ``error_type`` and has no ``error`` payload or ``cause`` object.
        """
        return UnwrappedFailure(self.message, error_type=self.error_type)


class UnwrappedFailure(Exception):  # noqa: N818
    """Raised when ``expect()`` is called on a Failure.

    This signals a contract violation by the caller, not a domain error, so it
    is never converted back into a Result by the bridging combinators' callers.

    Attributes:
        message: Human readable description.
        error_type: Runtime type of the Failure's error payload, or its qualified
            name when rebuilt from an UnwrappedFailureInfo.
        error: The error payload itself.
        cause: Optional underlying exception supplied by the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: type[Any] | str,
        error: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.error = error
        self.cause = cause
        super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        # keyword-only fields are not in self.args, so bind them for unpickling
        rebuild = functools.partial(type(self), error_type=self.error_type, error=self.error, cause=self.cause)
        return rebuild, (self.message,)

    def to_struct(self) -> UnwrappedFailureInfo:
        """Convert to struct for structured logging."""
        error_type = self.error_type if isinstance(self.error_type, str) else self.error_type.__qualname__
        return UnwrappedFailureInfo(
            message=self.message,
            error_type=error_type,
            cause=repr(self.cause) if self.cause is not None else None,
        )
