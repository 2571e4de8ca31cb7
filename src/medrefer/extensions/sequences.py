"""Helpers for outcomes whose success value is a sequence."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from ..functional_types import Outcome

E = TypeVar("E")
R = TypeVar("R")


def first(outcome: Outcome[Sequence[E]]) -> Outcome[E | None]:
    """First element, or `Success(None)` for an empty sequence."""
    return outcome.map(lambda items: items[0] if len(items) > 0 else None)


def last(outcome: Outcome[Sequence[E]]) -> Outcome[E | None]:
    """Last element, or `Success(None)` for an empty sequence."""
    return outcome.map(lambda items: items[-1] if len(items) > 0 else None)


def length(outcome: Outcome[Sequence[E]]) -> Outcome[int]:
    return outcome.map(len)


def is_empty(outcome: Outcome[Sequence[E]]) -> Outcome[bool]:
    return outcome.map(lambda items: len(items) == 0)


def is_not_empty(outcome: Outcome[Sequence[E]]) -> Outcome[bool]:
    return outcome.map(lambda items: len(items) > 0)


def where(outcome: Outcome[Sequence[E]], predicate: Callable[[E], bool]) -> Outcome[list[E]]:
    """Keeps the elements matching `predicate`, preserving order."""
    return outcome.map(lambda items: [item for item in items if predicate(item)])


def map_list(outcome: Outcome[Sequence[E]], fn: Callable[[E], R]) -> Outcome[list[R]]:
    """Applies `fn` to every element, preserving order and length."""
    return outcome.map(lambda items: [fn(item) for item in items])


__all__ = ["first", "is_empty", "is_not_empty", "last", "length", "map_list", "where"]
