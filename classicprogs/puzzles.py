"""Small interactive exercises: comparisons, a calculator, a stopwatch, Hanoi."""

from __future__ import annotations

import itertools
import sys
import time
from collections.abc import Iterator

_CLEAR_SCREEN = "\033[2J\033[H"


def largest_of_three(a: float, b: float, c: float) -> float:
    """The largest of three numbers."""
    return max(a, b, c)


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to two numbers."""
    a, b = float(a), float(b)
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise ZeroDivisionError("Error! Division by zero is not allowed.")
        return a / b
    raise ValueError("Invalid operator.")


def swap(a, b):
    """Return the two values in swapped order."""
    return b, a


def stopwatch_display(seconds: int) -> str:
    """The stopwatch line for an elapsed number of seconds, as ``HH:MM:SS``."""
    if seconds < 0:
        raise ValueError("elapsed time cannot be negative")
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"Stopwatch: {hours:02d}:{minutes:02d}:{secs:02d}"


def run_stopwatch(ticks: int | None = None) -> None:
    """Clear the terminal and show the elapsed time once a second.

    Runs for ``ticks`` seconds, or until interrupted when ``ticks`` is None.
    """
    elapsed = itertools.count() if ticks is None else range(ticks)
    for second in elapsed:
        sys.stdout.write(_CLEAR_SCREEN)
        print(stopwatch_display(second), flush=True)
        time.sleep(1)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Moves ``(disk, from_rod, to_rod)`` that shift ``n`` disks from ``source`` to ``target``."""
    if n <= 0:
        return
    yield from hanoi_moves(n - 1, source, spare, target)
    yield n, source, target
    yield from hanoi_moves(n - 1, spare, target, source)