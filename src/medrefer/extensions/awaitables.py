"""
Helpers that operate on an awaitable `Outcome` without awaiting it by hand.

These let a caller hand a pending service call straight to a transformation or
to a set of hooks, e.g. ``await handle(service.fetch(), on_error=show_banner)``.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..functional_types import Outcome

T = TypeVar("T")
R = TypeVar("R")


async def map_async(awaitable: Awaitable[Outcome[T]], fn: Callable[[T], R]) -> Outcome[R]:
    """Awaits the outcome, then applies `Outcome.map`."""
    outcome = await awaitable
    return outcome.map(fn)


async def handle(
    awaitable: Awaitable[Outcome[T]],
    *,
    on_success: Callable[[T], object] | None = None,
    on_error: Callable[[str, Any], object] | None = None,
    on_loading: Callable[[], object] | None = None,
) -> Outcome[T]:
    """
    Awaits the outcome and runs whichever hook matches its variant.

    Missing hooks are treated as no-ops. The awaited outcome is returned so the
    caller can keep working with it.
    """
    outcome = await awaitable
    if on_success is not None:
        outcome.on_success(on_success)
    if on_error is not None:
        outcome.on_error(on_error)
    if on_loading is not None:
        outcome.on_loading(on_loading)
    return outcome


async def unwrap_async(awaitable: Awaitable[Outcome[T]]) -> T:
    """Awaits the outcome and unwraps it; raises `UnwrapError` if not successful."""
    outcome = await awaitable
    return outcome.unwrap()


async def unwrap_or_async(awaitable: Awaitable[Outcome[T]], default: T) -> T:
    outcome = await awaitable
    return outcome.unwrap_or(default)


__all__ = ["handle", "map_async", "unwrap_async", "unwrap_or_async"]
