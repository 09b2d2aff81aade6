"""
Sequential higher-order primitives over sequences.

Every callback receives the element's index alongside its value, and every
operation walks the sequence strictly front to back. Nothing here mutates
the input sequence.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Sequence
import logging

__all__ = [
    "NOT_FOUND",
    "Predicate",
    "Action",
    "Transform",
    "Reducer",
    "find",
    "find_index",
    "filter",
    "for_each",
    "map",
    "reduce",
]

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A")
D = TypeVar("D")

Predicate = Callable[[int, V], bool]
Action = Callable[[int, V], None]
Transform = Callable[[int, V], R]
Reducer = Callable[[A, int, V], A]

NOT_FOUND = -1


def _check_args(op: str, fn: object, sequence: object) -> None:
    """Reject a missing callback or sequence before visiting anything."""
    if not callable(fn):
        logger.debug("%s: rejected non-callable %r", op, fn)
        raise TypeError(f"{op}() callback must be callable, got {type(fn).__name__}")
    if sequence is None:
        logger.debug("%s: rejected missing sequence", op)
        raise TypeError(f"{op}() sequence must not be None")


def find(
    predicate: Predicate[V],
    sequence: Sequence[V],
    default: D | None = None,
) -> V | D | None:
    """
    Return the first element for which predicate(index, value) is true.

    Stops at the first match. The returned object is the element held by
    the sequence, not a copy.

    Args:
        predicate: Called with (index, value) for each visited element.
        sequence: Sequence to search.
        default: Returned when no element matches. Pass a private
                 sentinel to tell a matched None apart from no match.
    """
    _check_args("find", predicate, sequence)
    for i, v in enumerate(sequence):
        if predicate(i, v):
            return v
    logger.debug("find: no match")
    return default


def find_index(predicate: Predicate[V], sequence: Sequence[V]) -> int:
    """
    Return the index of the first element matching predicate, or NOT_FOUND.

    NOT_FOUND is -1. Do not use it to index the sequence.
    """
    _check_args("find_index", predicate, sequence)
    for i, v in enumerate(sequence):
        if predicate(i, v):
            return i
    logger.debug("find_index: no match")
    return NOT_FOUND


def filter(predicate: Predicate[V], sequence: Sequence[V]) -> list[V]:
    """
    Return a new list of the elements for which predicate is true.

    Every element is visited once; indices passed to predicate are
    positions in the input sequence.
    """
    _check_args("filter", predicate, sequence)
    return [v for i, v in enumerate(sequence) if predicate(i, v)]


def for_each(action: Action[V], sequence: Sequence[V]) -> None:
    """Call action(index, value) once per element, in order."""
    # A plain for loop does the same thing.
    _check_args("for_each", action, sequence)
    for i, v in enumerate(sequence):
        action(i, v)


def map(transform: Transform[V, R], sequence: Sequence[V]) -> list[R]:
    """Return [transform(i, v) for each (i, v)], computed in index order."""
    _check_args("map", transform, sequence)
    return [transform(i, v) for i, v in enumerate(sequence)]


def reduce(
    reducer: Reducer[A, V],
    sequence: Sequence[V],
    initial: A,
) -> A:
    """
    Left fold: acc = reducer(acc, index, value) for each element in order.

    Args:
        reducer: Called with (accumulator, index, value), returns the next
                 accumulator.
        sequence: Sequence to fold.
        initial: Starting accumulator, returned as is for an empty sequence.

    Returns:
        The final accumulator.
    """
    _check_args("reduce", reducer, sequence)
    acc = initial
    for i, v in enumerate(sequence):
        acc = reducer(acc, i, v)
    return acc
