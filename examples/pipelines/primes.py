#!/usr/bin/env python3
"""
🔢 Prime Numbers Example

Builds an infinite sequence of primes from count() and bounds it with take(),
first with nested function calls and then with the fluent chain.

Usage:
    python examples/pipelines/primes.py
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

# Add lazyseq to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lazyseq import chain, count, enumerate, every, filter, range, take, take_while
from lazyseq.config.defaults import build_config
from lazyseq.core.logging import configure_logging

console = Console()


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return every(take_while(range(2, n), lambda d: d * d <= n), lambda d: n % d != 0)


def main(limit: int = 15) -> None:
    configure_logging(build_config({"log": {"level": "DEBUG"}})["log"])

    # Functional style: producers and transformers nest
    nested = list(take(filter(count(), is_prime), limit))

    # Fluent style: same pipeline, read left to right
    fluent = list(chain(count(), trace=True).filter(is_prime).take(limit))

    table = Table(title=f"First {limit} primes")
    table.add_column("#", justify="right")
    table.add_column("prime", justify="right")
    for index, prime in enumerate(fluent):
        table.add_row(str(index + 1), str(prime))

    console.print(table)
    console.print(f"Nested and fluent pipelines agree: {nested == fluent}")


if __name__ == "__main__":
    main()
