"""
Sequence consumers.

Consumers are the points where a lazy pipeline is actually iterated. Each
one drives its input (fully, or until it can short-circuit) and returns a
plain value. Feeding an infinite sequence to a fully consuming operator such
as ``reduce``, ``for_each`` or ``join`` never returns.
"""

from typing import Any, Callable, Iterable, Optional, TypeVar

from lazyseq.core.transformers import bind_context

T = TypeVar('T')
R = TypeVar('R')


def first(iterable: Iterable[T]) -> Optional[T]:
    """Return the first item, or None if the sequence is empty"""
    for item in iterable:
        return item
    return None

def find(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> Optional[T]:
    """Return the first item satisfying predicate, or None"""
    predicate = bind_context(predicate, context)
    for item in iterable:
        if predicate(item):
            return item
    return None

def some(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> bool:
    """Return True as soon as one item satisfies predicate"""
    predicate = bind_context(predicate, context)
    for item in iterable:
        if predicate(item):
            return True
    return False

def every(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> bool:
    """Return False as soon as one item fails predicate; True for empty input"""
    predicate = bind_context(predicate, context)
    for item in iterable:
        if not predicate(item):
            return False
    return True

def reduce(
    iterable: Iterable[T],
    fn: Callable[[R, T], R],
    initial: R = 0,
    context: Optional[Any] = None
) -> R:
    """
    Left fold over the sequence.

    Args:
        iterable: Sequence to fold
        fn: Called as fn(accumulator, item)
        initial: Starting accumulator; 0 unless given, whatever the item type
        context: Optional callback-binding context

    Returns:
        The final accumulator
    """
    fn = bind_context(fn, context)
    accumulator = initial
    for item in iterable:
        accumulator = fn(accumulator, item)
    return accumulator

def for_each(
    iterable: Iterable[T],
    fn: Callable[[T], Any],
    context: Optional[Any] = None
) -> None:
    """Call fn once per item for its side effect"""
    fn = bind_context(fn, context)
    for item in iterable:
        fn(item)

def join(iterable: Iterable[Any], separator: str = ',') -> str:
    """
    Concatenate the string form of every item.

    The separator is not placed between items. Instead, ``len(separator)``
    characters are cut from the end of the concatenation, so
    ``join(['a', 'b', 'c'], '-')`` is ``'ab'`` and an empty separator always
    gives ``''``.
    """
    text = ''.join(map(str, iterable))
    return text[:-len(separator)]
