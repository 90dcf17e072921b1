"""Reusable validator builders.

A validator is any one-argument callable returning a truth value.  The
helpers here cover the common cases; callers are free to pass their own
lambdas instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

Validator = Callable[[T], bool]
"""Predicate applied to a successfully parsed value."""


def in_range(minimum: Any = None, maximum: Any = None) -> Validator[Any]:
    """Accept values within ``[minimum, maximum]``; ``None`` leaves a side open."""

    def check(value: Any) -> bool:
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    return check


def one_of(choices: Iterable[T]) -> Validator[T]:
    """Accept only values equal to one of *choices*."""
    allowed = tuple(choices)

    def check(value: T) -> bool:
        return value in allowed

    return check


def non_empty(value: Any) -> bool:
    """Reject blank strings, empty containers and ``None``."""
    if isinstance(value, str):
        return bool(value.strip())
    try:
        return len(value) > 0
    except TypeError:
        return value is not None


def all_of(*validators: Validator[T]) -> Validator[T]:
    """Accept a value only if every validator accepts it (short-circuits)."""

    def check(value: T) -> bool:
        return all(validator(value) for validator in validators)

    return check


__all__: list[str] = ["Validator", "all_of", "in_range", "non_empty", "one_of"]
