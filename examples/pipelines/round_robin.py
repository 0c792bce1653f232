#!/usr/bin/env python3
"""
🔁 Round-Robin Assignment Example

Assigns a batch of tasks to workers in turn using cycle(), then summarises
the assignment with consumers.

Usage:
    python examples/pipelines/round_robin.py
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

# Add lazyseq to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lazyseq import chain, cycle, map, repeat

console = Console()

WORKERS = ["ada", "grace", "linus"]


def main(task_count: int = 8) -> None:
    workers = cycle(WORKERS)
    tasks = map(range(1, task_count + 1), lambda n: f"task-{n}")

    assignments = (
        chain(tasks)
        .map(lambda task: (next(workers), task))
        .tap(lambda pair: console.print(f"  {pair[1]} -> [bold]{pair[0]}[/bold]"))
        .reduce(lambda acc, pair: {**acc, pair[0]: acc.get(pair[0], 0) + 1}, {})
        .value
    )

    # join() trims len(separator) characters instead of inserting it
    separator = chain(repeat("─", 31)).join("─").value
    summary = "\n".join(f"{name}: {n}" for name, n in assignments.items())
    console.print(Panel(f"{summary}\n{separator}", title="Tasks per worker"))


if __name__ == "__main__":
    main()
