"""Helpers for outcomes whose success value is a mapping.

A missing key is not a failure: lookups on a successful mapping always stay
successful, and non-success outcomes pass through unchanged.
"""

from collections.abc import Mapping
from typing import TypeVar

from ..functional_types import Outcome

K = TypeVar("K")
V = TypeVar("V")


def get_value(outcome: Outcome[Mapping[K, V]], key: K) -> Outcome[V | None]:
    return outcome.map(lambda mapping: mapping.get(key))


def contains_key(outcome: Outcome[Mapping[K, V]], key: K) -> Outcome[bool]:
    return outcome.map(lambda mapping: key in mapping)


def contains_value(outcome: Outcome[Mapping[K, V]], value: V) -> Outcome[bool]:
    return outcome.map(lambda mapping: value in mapping.values())


def keys(outcome: Outcome[Mapping[K, V]]) -> Outcome[frozenset[K]]:
    return outcome.map(frozenset)


def values(outcome: Outcome[Mapping[K, V]]) -> Outcome[list[V]]:
    return outcome.map(lambda mapping: list(mapping.values()))


__all__ = ["contains_key", "contains_value", "get_value", "keys", "values"]
