"""
Lazyseq: lazy, composable operators over finite and infinite sequences,
with a fluent chain wrapper for building pipelines left to right.

Nothing is evaluated until a consumer (or an explicit iteration) pulls
items through the pipeline.
"""

__version__ = "1.0.0"

from loguru import logger

from lazyseq.api.chain import Chain, ChainState, chain
from lazyseq.config.defaults import build_config
from lazyseq.core.consumers import every, find, first, for_each, join, reduce, some
from lazyseq.core.errors import ChainStateError, ConfigurationError, LazyseqError
from lazyseq.core.logging import configure_logging, get_logger
from lazyseq.core.producers import count, range, repeat
from lazyseq.core.transformers import (
    concat, cycle, drop, drop_while, enumerate, filter, flat, flat_map,
    iterator, map, take, take_while, tap,
)

# Silent until configure_logging() is called
logger.disable("lazyseq")

__all__ = [
    "chain",
    "Chain",
    "ChainState",
    # producers
    "count",
    "repeat",
    "range",
    # transformers
    "cycle",
    "map",
    "filter",
    "tap",
    "enumerate",
    "take",
    "drop",
    "take_while",
    "drop_while",
    "flat",
    "flat_map",
    "iterator",
    "concat",
    # consumers
    "first",
    "find",
    "some",
    "every",
    "reduce",
    "for_each",
    "join",
    # errors
    "LazyseqError",
    "ChainStateError",
    "ConfigurationError",
    # setup
    "build_config",
    "configure_logging",
    "get_logger",
]
