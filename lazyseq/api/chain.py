"""
Fluent wrapper over the sequence operators.

A Chain holds one current value. Each method applies the operator of the
same name to that value, stores the result and returns the chain, so a
pipeline reads left to right:

    chain(count()).filter(is_even).map(square).take(5).reduce(add).value

Consumer methods leave a terminal result behind; after one of them only the
value accessors remain usable.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional

from lazyseq.config.defaults import trace_enabled
from lazyseq.core import consumers, transformers
from lazyseq.core.errors import ChainStateError
from lazyseq.core.logging import log_and_reraise, trace_context


class ChainState(Enum):
    """What the chain's current value is"""
    SEQUENCE = "sequence"
    TERMINAL = "terminal"


class Chain:
    """Mutable cell threading a value through sequence operators"""

    def __init__(self, value: Any, trace: Optional[bool] = None):
        self._value = value
        self._state = ChainState.SEQUENCE
        self._trace = trace

    # --------- accessors ----------
    @property
    def value(self) -> Any:
        return self._value

    def unwrap(self) -> Any:
        """Return the current value"""
        return self._value

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state is ChainState.TERMINAL

    @property
    def trace(self) -> bool:
        """Whether calls are logged; unset means LAZYSEQ_TRACE_CHAIN decides"""
        if self._trace is None:
            return trace_enabled()
        return self._trace

    # --------- transformers (lazy) ----------
    def cycle(self) -> 'Chain':
        return self._transform("cycle", transformers.cycle)

    def map(self, fn: Callable[[Any], Any], context: Optional[Any] = None) -> 'Chain':
        return self._transform("map", transformers.map, fn, context)

    def filter(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._transform("filter", transformers.filter, predicate, context)

    def tap(self, fn: Callable[[Any], Any], context: Optional[Any] = None) -> 'Chain':
        return self._transform("tap", transformers.tap, fn, context)

    def enumerate(self) -> 'Chain':
        return self._transform("enumerate", transformers.enumerate)

    def take(self, limit: int) -> 'Chain':
        return self._transform("take", transformers.take, limit)

    def drop(self, limit: int) -> 'Chain':
        return self._transform("drop", transformers.drop, limit)

    def take_while(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._transform("take_while", transformers.take_while, predicate, context)

    def drop_while(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._transform("drop_while", transformers.drop_while, predicate, context)

    def flat(self) -> 'Chain':
        return self._transform("flat", transformers.flat)

    def flat_map(self, fn: Callable[[Any], Any], context: Optional[Any] = None) -> 'Chain':
        return self._transform("flat_map", transformers.flat_map, fn, context)

    def iterator(self) -> 'Chain':
        return self._transform("iterator", transformers.iterator)

    def concat(self, *iterables: Iterable[Any]) -> 'Chain':
        """Append the given sequences after the current one"""
        return self._transform("concat", transformers.concat, *iterables)

    # --------- consumers (force evaluation) ----------
    def first(self) -> 'Chain':
        return self._consume("first", consumers.first)

    def find(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._consume("find", consumers.find, predicate, context)

    def some(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._consume("some", consumers.some, predicate, context)

    def every(self, predicate: Callable[[Any], bool], context: Optional[Any] = None) -> 'Chain':
        return self._consume("every", consumers.every, predicate, context)

    def reduce(
        self,
        fn: Callable[[Any, Any], Any],
        initial: Any = 0,
        context: Optional[Any] = None
    ) -> 'Chain':
        return self._consume("reduce", consumers.reduce, fn, initial, context)

    def for_each(self, fn: Callable[[Any], Any], context: Optional[Any] = None) -> 'Chain':
        return self._consume("for_each", consumers.for_each, fn, context)

    def join(self, separator: str = ',') -> 'Chain':
        return self._consume("join", consumers.join, separator)

    # --------- iterator protocol ----------
    def __iter__(self) -> Iterator[Any]:
        self._require_sequence("__iter__")
        return iter(self._value)

    def __repr__(self) -> str:
        return f"Chain(state={self._state.value}, value=<{type(self._value).__name__}>)"

    # --------- helpers ----------
    def _transform(self, name: str, operator: Callable[..., Any], *args: Any) -> 'Chain':
        self._require_sequence(name)
        self._value = operator(self._value, *args)
        self._log_call(name)
        return self

    def _consume(self, name: str, operator: Callable[..., Any], *args: Any) -> 'Chain':
        self._require_sequence(name)
        self._value = operator(self._value, *args)
        self._state = ChainState.TERMINAL
        self._log_call(name)
        return self

    def _require_sequence(self, name: str) -> None:
        terminal = self._state is ChainState.TERMINAL
        if terminal or not _is_iterable(self._value):
            log_and_reraise(
                ChainStateError(name, self._value, terminal),
                context=f"chain.{name}"
            )

    def _log_call(self, name: str) -> None:
        if self.trace:
            with trace_context(name=__name__, operation=name, state=self._state.value) as ctx_logger:
                ctx_logger.debug(f"chain.{name}() -> {self._state.value} <{type(self._value).__name__}>")


def _is_iterable(value: Any) -> bool:
    # iter() also accepts the __getitem__ sequence protocol, as the operators do
    try:
        iter(value)
    except TypeError:
        return False
    return True

def chain(value: Any, trace: Optional[bool] = None) -> Chain:
    """
    Wrap a value for fluent chaining.

    Args:
        value: Initial value, normally an iterable; not validated here
        trace: Log each chained call; defaults to LAZYSEQ_TRACE_CHAIN

    Returns:
        A new Chain in sequence state
    """
    return Chain(value, trace=trace)
