"""
Bridges between `Outcome` and the `returns` library.

`returns` models two states (`Success`/`Failure`), so a `Loading` outcome has no
direct counterpart and is reported as a failure when converted.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

from returns.pipeline import is_successful
from returns.result import Failure, Result, safe
from returns.result import Success as ResultSuccess

from .app.config import PENDING_FAILURE_MESSAGE
from .functional_types import Error, Loading, Outcome, Success, error, success

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

# The wrapper keeps its own `Outcome` annotations rather than those of `fn`.
_WRAPPER_ASSIGNMENTS = ("__module__", "__name__", "__qualname__", "__doc__")


def _describe(failure: object) -> str:
    if isinstance(failure, BaseException):
        return str(failure) or type(failure).__name__
    return str(failure)


def from_result(result: Result[T, Any]) -> Outcome[T]:
    """
    Converts a `returns` result into an `Outcome`.

    An exception held by a `Failure` becomes the error's `cause`, and its
    traceback becomes the error's `trace`.
    """
    if is_successful(result):
        return success(result.unwrap())
    failure = result.failure()
    if isinstance(failure, BaseException):
        return error(_describe(failure), failure, failure.__traceback__)
    return error(_describe(failure))


def to_result(outcome: Outcome[T]) -> Result[T, str]:
    """Converts an `Outcome` into a `returns` result carrying the error message."""
    match outcome:
        case Success(value):
            return ResultSuccess(value)
        case Error(message):
            return Failure(message)
        case Loading():
            return Failure(PENDING_FAILURE_MESSAGE)


def _log_failure(name: str) -> Callable[[str, Any], None]:
    def log(message: str, cause: Any) -> None:
        logger.debug("%s failed: %s", name, message, exc_info=cause)

    return log


def attempt(fn: Callable[P, T]) -> Callable[P, Outcome[T]]:
    """
    Decorates `fn` so that it returns an `Outcome` instead of raising.

    Any `Exception` raised by `fn` is captured as an `Error` whose `cause` is the
    exception; other `BaseException`s (e.g. KeyboardInterrupt) still propagate.
    """
    guarded = safe(fn)

    @functools.wraps(fn, assigned=_WRAPPER_ASSIGNMENTS)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        return from_result(guarded(*args, **kwargs)).on_error(_log_failure(fn.__qualname__))

    return wrapper


def attempt_async(fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Outcome[T]]]:
    """Coroutine counterpart of `attempt`."""

    @functools.wraps(fn, assigned=_WRAPPER_ASSIGNMENTS)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        # `future_safe` yields an IOResult rather than a Result, so failures are caught here.
        try:
            value = await fn(*args, **kwargs)
        except Exception as exc:
            return error(_describe(exc), exc, exc.__traceback__).on_error(
                _log_failure(fn.__qualname__)
            )
        return success(value)

    return wrapper


__all__ = ["attempt", "attempt_async", "from_result", "to_result"]
