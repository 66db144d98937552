"""Assorted helpers for working with sequences and other iterables

All helpers validate their arguments and raise an :class:`ArgumentError`
on violation.
"""

from __future__ import annotations

import os
from itertools import islice
from math import prod
from typing import (
    TYPE_CHECKING,
    TypeVar,
)

if TYPE_CHECKING:
    from collections.abc import (
        Iterable,
        Iterator,
        MutableSequence,
    )
    from random import Random
    from typing import TextIO

from datasalad.itertools import itemize

from argcheck.check import (
    check_not_null,
    validate,
)
from argcheck.constraints import StringAssertion

T = TypeVar('T')

def contains_ci(values: Iterable[str], search_value: str) -> bool:
    """Returns whether ``values`` contain ``search_value``, ignoring case"""
    check_not_null(values, 'values')
    validate(
        search_value,
        'search_value',
        StringAssertion.not_null | StringAssertion.not_zero_length,
    )
    needle = search_value.casefold()
    return any(v.casefold() == needle for v in values)


def join_lines(values: Iterable[str], separator: str = os.linesep) -> str:
    """Join ``values`` with a ``separator``, platform line ending by default"""
    check_not_null(values, 'values')
    check_not_null(separator, 'separator')
    return separator.join(values)


def join_and_indent(
    values: Iterable[str],
    indent: int,
    separator: str = os.linesep,
) -> str:
    """Indent all lines of each value by ``indent`` spaces, and join them"""
    check_not_null(values, 'values')
    check_not_null(separator, 'separator')
    if indent <= 0:
        msg = f'indent must be greater than 0, not {indent}'
        raise ValueError(msg)
    prefix = ' ' * indent
    return separator.join(
        ''.join(f'{prefix}{line}' for line in v.splitlines(keepends=True))
        for v in values
    )


def lines(textio: TextIO) -> Iterator[str]:
    """Returns an iterator over the lines of a text stream, without line endings"""
    check_not_null(textio, 'textio')
    # iterating the stream yields complete lines, a '\r\n' is never split
    return itemize(textio, sep=None, keep_ends=False)


def is_null_or_empty(items: Iterable | None) -> bool:
    """Returns whether ``items`` is ``None`` or has no elements

    Only a single element of an iterator is consumed.
    """
    if items is None:
        return True
    return next(iter(items), _sentinel) is _sentinel


def tail(items: Iterable[T] | None) -> Iterator[T] | None:
    """Returns all but the first item, or ``None`` if ``items`` is ``None``"""
    if items is None:
        return None
    return islice(items, 1, None)


def product(ints: Iterable[int]) -> int:
    """Returns the product of integers, ``1`` for no integers"""
    check_not_null(ints, 'ints')
    return prod(ints)


def split(items: Iterable[T], num_parts: int) -> list[list[T]]:
    """Distribute items round-robin into (at most) ``num_parts`` groups

    The n-th item is placed into group ``n % num_parts``. Only groups that
    receive at least one item are returned.
    """
    check_not_null(items, 'items')
    if num_parts <= 0:
        msg = f'num_parts must be greater than 0, not {num_parts}'
        raise ValueError(msg)
    groups: list[list[T]] = []
    for i, item in enumerate(items):
        if i < num_parts:
            groups.append([item])
        else:
            groups[i % num_parts].append(item)
    return groups


def shuffle(items: MutableSequence[T], rng: Random) -> MutableSequence[T]:
    """Shuffle a mutable sequence in-place, and return it

    A Fisher-Yates shuffle driven by the given random number generator.
    Pass a seeded ``random.Random`` instance to obtain a reproducible order.
    """
    check_not_null(items, 'items')
    check_not_null(rng, 'rng')
    for current in range(len(items) - 1, 0, -1):
        other = rng.randrange(current + 1)
        items[current], items[other] = items[other], items[current]
    return items


_sentinel = object()
