"""
Seqfold: index-aware higher-order primitives over sequences.

Provides find, find_index, filter, for_each, map and reduce. Every
callback receives (index, value), and every operation walks the sequence
front to back without mutating it.

Usage:
    from seqfold import find, find_index, filter, map, reduce, NOT_FOUND

    first_big = find(lambda i, v: v > 2, [1, 2, 3, 4])        # 3
    evens = filter(lambda i, v: v % 2 == 0, [1, 2, 3, 4])     # [2, 4]
    total = reduce(lambda acc, i, v: acc + v, [1, 2, 3], 0)   # 6

    # Same operations with async callbacks, awaited one at a time
    from seqfold import aio
    doubled = await aio.map(async_double, items)
"""

import logging

from .primitives import (
    NOT_FOUND,
    Predicate,
    Action,
    Transform,
    Reducer,
    find,
    find_index,
    filter,
    for_each,
    map,
    reduce,
)
from . import aio

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Core primitives
    "find",
    "find_index",
    "filter",
    "for_each",
    "map",
    "reduce",
    # Not-found sentinel and callback types
    "NOT_FOUND",
    "Predicate",
    "Action",
    "Transform",
    "Reducer",
    # Async variants
    "aio",
]
