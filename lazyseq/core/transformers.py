"""
Sequence transformers.

Every transformer wraps its input and pulls from it one item at a time;
nothing is read until the returned generator is iterated. Names follow the
builtins they mirror (``map``, ``filter``, ``enumerate``), so import this
module qualified or pick names explicitly.
"""

from functools import partial
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')

STRING_TYPES = (str, bytes, bytearray)


def bind_context(fn: Callable[..., Any], context: Optional[Any] = None) -> Callable[..., Any]:
    """
    Bind a callback-binding context as the callback's first argument.

    Args:
        fn: Caller-supplied callback
        context: Object passed ahead of the item, like an explicit ``self``

    Returns:
        fn itself when no context is given, otherwise a partial
    """
    if context is None:
        return fn
    return partial(fn, context)

def is_flattable(item: Any) -> bool:
    """Check if iterable but not string-like"""
    if isinstance(item, STRING_TYPES):
        return False
    try:
        iter(item)
    except TypeError:
        return False
    return True

# Side-effect and mapping transformers

def tap(
    iterable: Iterable[T],
    fn: Callable[[T], Any],
    context: Optional[Any] = None
) -> Iterator[T]:
    """Call fn on each item for its side effect and yield the item unchanged"""
    fn = bind_context(fn, context)
    for item in iterable:
        fn(item)
        yield item

def map(
    iterable: Iterable[T],
    fn: Callable[[T], U],
    context: Optional[Any] = None
) -> Iterator[U]:
    """Map a function over sequence items"""
    fn = bind_context(fn, context)
    for item in iterable:
        yield fn(item)

def filter(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> Iterator[T]:
    """Filter sequence items based on predicate"""
    predicate = bind_context(predicate, context)
    for item in iterable:
        if predicate(item):
            yield item

def enumerate(iterable: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Pair each item with its zero-based position"""
    index = 0
    for item in iterable:
        yield index, item
        index += 1

# Slicing transformers

def take(iterable: Iterable[T], limit: int) -> Iterator[T]:
    """Take only the first limit items from the sequence"""
    if limit <= 0:
        return
    taken = 0
    for item in iterable:
        yield item
        taken += 1
        # Stop before pulling an item that would be discarded
        if taken >= limit:
            return

def drop(iterable: Iterable[T], limit: int) -> Iterator[T]:
    """Skip the first limit items from the sequence"""
    skipped = 0
    for item in iterable:
        if skipped < limit:
            skipped += 1
            continue
        yield item

def take_while(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> Iterator[T]:
    """Yield items until the first one failing predicate, then stop for good"""
    predicate = bind_context(predicate, context)
    for item in iterable:
        if not predicate(item):
            return
        yield item

def drop_while(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    context: Optional[Any] = None
) -> Iterator[T]:
    """Skip items while predicate holds, then yield everything that remains"""
    predicate = bind_context(predicate, context)
    cursor = iter(iterable)
    for item in cursor:
        if not predicate(item):
            yield item
            break
    yield from cursor

# Structural transformers

def flat(iterable: Iterable[Any]) -> Iterator[Any]:
    """
    Flatten one level of nesting.

    Iterable items are expanded in place; strings, bytes and non-iterable
    items are yielded as they are. Mappings count as iterable, so a dict
    contributes its keys: ``flat([{"a": 1}, 2])`` yields ``"a", 2``.
    """
    for item in iterable:
        if is_flattable(item):
            yield from item
        else:
            yield item

def flat_map(
    iterable: Iterable[Any],
    fn: Callable[[Any], U],
    context: Optional[Any] = None
) -> Iterator[U]:
    """Flatten one level, then map fn over the result"""
    return map(flat(iterable), fn, context)

def iterator(iterable: Iterable[T]) -> Iterator[T]:
    """Wrap any iterable into a lazy single-pass sequence"""
    yield from iterable

def concat(*iterables: Iterable[T]) -> Iterator[T]:
    """Concatenate multiple sequences"""
    for iterable in iterables:
        yield from iterable

def cycle(iterable: Iterable[T]) -> Iterator[T]:
    """
    Yield the items of the sequence, then repeat them forever.

    Items are cached during the first pass, so the source is read only once.
    An infinite source never reaches the repeat phase.
    """
    cache: list[T] = []
    yield from tap(iterable, cache.append)

    if not cache:
        return
    while True:
        yield from cache
