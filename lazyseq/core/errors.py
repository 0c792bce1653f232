"""
Error types for lazyseq.

Operators fail fast: exceptions raised by caller callbacks propagate
unchanged, so the only library-specific errors are chain misuse and
configuration problems.
"""


class LazyseqError(Exception):
    """Base exception for all lazyseq errors"""
    pass

class ChainStateError(LazyseqError, TypeError):
    """An operator was applied to a chain value that is not a sequence"""

    def __init__(self, operation: str, value, terminal: bool):
        self.operation = operation
        self.value = value
        self.terminal = terminal
        if terminal:
            reason = "chain holds a terminal result"
        else:
            reason = f"'{type(value).__name__}' object is not iterable"
        super().__init__(f"cannot call {operation}(): {reason}")

class ConfigurationError(LazyseqError, ValueError):
    """Configuration-related errors"""
    pass
