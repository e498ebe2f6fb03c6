from __future__ import annotations

"""Iteration helpers that flag the first and/or last value."""

from typing import Iterable, Iterator, Optional, Tuple, TypeVar


T = TypeVar("T")


def loop_first(values: Iterable[T]) -> Iterator[Tuple[bool, T]]:
    """Yield (is_first, value) pairs."""
    first = True
    for value in values:
        yield first, value
        first = False


def loop_last(values: Iterable[T]) -> Iterator[Tuple[bool, T]]:
    """Yield (is_last, value) pairs."""
    iter_values = iter(values)
    try:
        previous_value = next(iter_values)
    except StopIteration:
        return
    for value in iter_values:
        yield False, previous_value
        previous_value = value
    yield True, previous_value


def loop_first_last(values: Iterable[T]) -> Iterator[Tuple[bool, T]]:
    """Yield (is_first or is_last, value) pairs."""
    for first, (last, value) in loop_first(loop_last(values)):
        yield first or last, value


def pick_bool(*values: Optional[bool]) -> bool:
    """Return the first value that is not None, or False."""
    for value in values:
        if value is not None:
            return bool(value)
    return False


__all__ = ["loop_first", "loop_last", "loop_first_last", "pick_bool"]
