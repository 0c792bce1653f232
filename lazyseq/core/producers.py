"""
Sequence producers.

Generators that create a sequence from plain arguments rather than from
another sequence. ``count`` and the default ``repeat`` never end on their
own and have to be bounded downstream, typically with ``take``.
"""

import math
from typing import Iterator, Optional, TypeVar, Union

T = TypeVar('T')

Number = Union[int, float]


def count(start: Number = 0, step: Number = 1) -> Iterator[Number]:
    """Yield start, start + step, start + 2 * step, ... forever"""
    while True:
        yield start
        start += step

def repeat(value: T, n: Number = math.inf) -> Iterator[T]:
    """Yield value n times, or forever when n is left unbounded"""
    i = 0
    while i < n:
        yield value
        i += 1

def range(
    start: Number,
    stop: Optional[Number] = None,
    step: Number = 1
) -> Iterator[Number]:
    """
    Bounded arithmetic sequence.

    ``range(stop)`` counts up from 0. With both bounds given they are
    reordered by the sign of ``step`` instead of producing an empty
    sequence: a positive step walks from the smaller bound up to the larger
    one (exclusive), a negative step walks from the larger bound down to the
    smaller one (exclusive). ``range(5, 0)`` therefore yields 0..4 and
    ``range(0, 5, -1)`` yields 5..1.

    Args:
        start: First bound, or the stop value when it is the only argument
        stop: Second bound
        step: Increment; its sign picks the direction

    Raises:
        ValueError: If step is zero
    """
    if step == 0:
        raise ValueError("range() step must not be zero")

    if stop is None:
        start, stop = 0, start

    if step > 0:
        start, stop = min(start, stop), max(start, stop)
        while start < stop:
            yield start
            start += step
    else:
        start, stop = max(start, stop), min(start, stop)
        while start > stop:
            yield start
            start += step
