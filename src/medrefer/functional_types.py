"""
Defines the tri-state `Outcome` Algebraic Data Type used across the service layer.

An `Outcome` is a closed sum type with exactly three variants:

- `Success`: the operation completed and produced a value.
- `Error`: the operation failed in an expected way. It carries a human-readable
  message plus optional, opaque diagnostics (`cause` and `trace`).
- `Loading`: the operation is still in flight. It carries no payload.

Services return an `Outcome` instead of raising for expected failures (bad
credentials, invalid input, missing records), and consumers either branch on the
variant with `match` or use the combinators below. Transformations run only on
`Success`; `Error` and `Loading` pass through untouched, so a chain of operations
short-circuits on its first failure.

The only operation that raises on its own account is `unwrap()` on a non-success
variant, which is a programming error rather than an expected failure.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union, cast

# T represents the type of the success value.
# U represents the type produced by a transformation.
T = TypeVar("T")
U = TypeVar("U")


class UnwrapError(RuntimeError):
    """Raised when `unwrap()` is called on an `Error` or `Loading` outcome."""


class _OutcomeOps(Generic[T]):
    """Combinators shared by every `Outcome` variant."""

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_error(self) -> bool:
        return isinstance(self, Error)

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    def map(self, fn: Callable[[T], U]) -> Outcome[U]:
        """Applies `fn` to the success value; other variants pass through."""
        match self:
            case Success(value):
                return Success(fn(value))
            case _:
                return self._passthrough()

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """Returns `fn(value)` on success, otherwise `default` as-is."""
        match self:
            case Success(value):
                return fn(value)
            case _:
                return default

    def map_or_else(self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Like `map_or`, but the fallback is computed only when needed."""
        match self:
            case Success(value):
                return fn(value)
            case _:
                return default_fn()

    async def and_then(self, fn: Callable[[T], Awaitable[Outcome[U]]]) -> Outcome[U]:
        """Chains an asynchronous operation that itself returns an `Outcome`."""
        match self:
            case Success(value):
                return await fn(value)
            case _:
                return self._passthrough()

    def and_then_sync(self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chains a synchronous operation that itself returns an `Outcome`."""
        match self:
            case Success(value):
                return fn(value)
            case _:
                return self._passthrough()

    def unwrap(self) -> T:
        """
        Returns the success value.

        Raises:
            UnwrapError: If the outcome is an `Error` or `Loading`. When the error
                carries an exception as its cause, it is chained.
        """
        match self:
            case Success(value):
                return value
            case Error(message, cause):
                chained = cause if isinstance(cause, BaseException) else None
                raise UnwrapError(f"Unwrapped error result: {message}") from chained
            case _:
                raise UnwrapError("Unwrapped loading result")

    def unwrap_or(self, default: T) -> T:
        match self:
            case Success(value):
                return value
            case _:
                return default

    def unwrap_or_else(self, default_fn: Callable[[], T]) -> T:
        match self:
            case Success(value):
                return value
            case _:
                return default_fn()

    def on_success(self, fn: Callable[[T], object]) -> Outcome[T]:
        """Runs `fn(value)` if successful and returns the outcome unchanged."""
        if isinstance(self, Success):
            fn(self.value)
        return self  # type: ignore[return-value]

    def on_error(self, fn: Callable[[str, Any], object]) -> Outcome[T]:
        """Runs `fn(message, cause)` on error and returns the outcome unchanged."""
        if isinstance(self, Error):
            fn(self.message, self.cause)
        return self  # type: ignore[return-value]

    def on_loading(self, fn: Callable[[], object]) -> Outcome[T]:
        """Runs `fn()` while loading and returns the outcome unchanged."""
        if isinstance(self, Loading):
            fn()
        return self  # type: ignore[return-value]

    def _passthrough(self) -> Error | Loading:
        # Error and Loading are immutable and not parameterised by T,
        # so the same instance is valid for any target type.
        return cast("Error | Loading", self)


@dataclass(frozen=True, slots=True)
class Success(_OutcomeOps[T]):
    """Represents a completed operation carrying its value."""

    value: T

    @property
    def error_message(self) -> None:
        return None

    @property
    def cause(self) -> None:
        return None

    @property
    def trace(self) -> None:
        return None

    def __str__(self) -> str:
        return f"Success({self.value})"


@dataclass(frozen=True, slots=True)
class Error(_OutcomeOps[Any]):
    """
    Represents an expected failure.

    Only `message` takes part in equality and hashing; `cause` and `trace` are
    diagnostic attachments that are carried along but never inspected.
    """

    message: str
    cause: Any = field(default=None, compare=False)
    trace: Any = field(default=None, compare=False, repr=False)

    @property
    def value(self) -> None:
        return None

    @property
    def error_message(self) -> str:
        return self.message

    def __str__(self) -> str:
        return f"Error({self.message})"


@dataclass(frozen=True, slots=True)
class Loading(_OutcomeOps[Any]):
    """Represents an operation that has started but not yet completed."""

    @property
    def value(self) -> None:
        return None

    @property
    def error_message(self) -> None:
        return None

    @property
    def cause(self) -> None:
        return None

    @property
    def trace(self) -> None:
        return None

    def __str__(self) -> str:
        return "Loading()"


# The Outcome type is a union of its three variants.
Outcome = Union[Success[T], Error, Loading]

_LOADING = Loading()


def success(value: T) -> Outcome[T]:
    """Wraps `value` as-is in a `Success`."""
    return Success(value)


def error(message: str, cause: Any = None, trace: Any = None) -> Outcome[Any]:
    """Builds an `Error` with a caller-facing message and optional diagnostics."""
    return Error(message, cause, trace)


def loading() -> Outcome[Any]:
    return _LOADING


__all__ = [
    "Error",
    "Loading",
    "Outcome",
    "Success",
    "UnwrapError",
    "error",
    "loading",
    "success",
]
