"""
Async counterparts of the sequence primitives.

Callbacks may be coroutine functions, or plain functions. Each callback
result is awaited before the next element is visited, so ordering,
short-circuiting and call counts match seqfold.primitives exactly.
Nothing runs in parallel.

Example:
    async def is_relevant(i: int, doc: str) -> bool:
        return await llm.judge(doc)

    first = await aio.find(is_relevant, docs)
"""

from __future__ import annotations
from typing import TypeVar, Callable, Awaitable, Sequence
import inspect
import logging

from .primitives import NOT_FOUND, _check_args

__all__ = [
    "AsyncPredicate",
    "AsyncAction",
    "AsyncTransform",
    "AsyncReducer",
    "find",
    "find_index",
    "filter",
    "for_each",
    "map",
    "reduce",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A")
D = TypeVar("D")

AsyncPredicate = Callable[[int, V], bool | Awaitable[bool]]
AsyncAction = Callable[[int, V], Awaitable[None] | None]
AsyncTransform = Callable[[int, V], R | Awaitable[R]]
AsyncReducer = Callable[[A, int, V], A | Awaitable[A]]


async def _resolve(result: T | Awaitable[T]) -> T:
    if inspect.isawaitable(result):
        return await result
    return result


async def find(
    predicate: AsyncPredicate[V],
    sequence: Sequence[V],
    default: D | None = None,
) -> V | D | None:
    """
    Return the first element whose awaited predicate is true, else default.

    The predicate is not called again after the first match. The returned
    object is the element held by the sequence.
    """
    _check_args("find", predicate, sequence)
    for i, v in enumerate(sequence):
        if await _resolve(predicate(i, v)):
            return v
    logger.debug("aio.find: no match")
    return default


async def find_index(predicate: AsyncPredicate[V], sequence: Sequence[V]) -> int:
    """Return the index of the first match, or NOT_FOUND (-1)."""
    _check_args("find_index", predicate, sequence)
    for i, v in enumerate(sequence):
        if await _resolve(predicate(i, v)):
            return i
    logger.debug("aio.find_index: no match")
    return NOT_FOUND


async def filter(predicate: AsyncPredicate[V], sequence: Sequence[V]) -> list[V]:
    """Return a new list of the elements whose awaited predicate is true."""
    _check_args("filter", predicate, sequence)
    result: list[V] = []
    for i, v in enumerate(sequence):
        if await _resolve(predicate(i, v)):
            result.append(v)
    return result


async def for_each(action: AsyncAction[V], sequence: Sequence[V]) -> None:
    _check_args("for_each", action, sequence)
    for i, v in enumerate(sequence):
        await _resolve(action(i, v))


async def map(transform: AsyncTransform[V, R], sequence: Sequence[V]) -> list[R]:
    """Return the awaited transform of each element, one at a time."""
    _check_args("map", transform, sequence)
    result: list[R] = []
    for i, v in enumerate(sequence):
        result.append(await _resolve(transform(i, v)))
    return result


async def reduce(
    reducer: AsyncReducer[A, V],
    sequence: Sequence[V],
    initial: A,
) -> A:
    """
    Sequential left fold with an async reducer.

    Args:
        reducer: Called with (accumulator, index, value); its awaited
                 result becomes the next accumulator.
        sequence: Sequence to fold.
        initial: Starting accumulator, returned as is for an empty sequence.
    """
    _check_args("reduce", reducer, sequence)
    acc = initial
    for i, v in enumerate(sequence):
        acc = await _resolve(reducer(acc, i, v))
    return acc
