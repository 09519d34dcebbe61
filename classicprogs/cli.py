"""Command line entry point for the classic exercises."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TypeVar

from .matrices import format_pascal
from .numbers import factorial, is_prime
from .puzzles import calculate, hanoi_moves, run_stopwatch

T = TypeVar("T")

_GREETING = "Hello, World!"


def _read(
    prompt: str, given: Sequence[str], count: int, convert: Callable[[str], T]
) -> list[T]:
    """Use the values from the command line, or ask for them on standard input."""
    tokens = list(given) or input(prompt).split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} value(s), got {len(tokens)}")
    return [convert(token) for token in tokens[:count]]


def _sum(args: argparse.Namespace) -> int:
    a, b = _read("Enter two numbers: ", args.numbers, 2, int)
    print(f"Sum: {a + b}")
    return 0


def _calc(args: argparse.Namespace) -> int:
    operator = args.operator or _read("Enter an operator (+, -, *, /): ", [], 1, str)[0]
    a, b = _read("Enter two numbers: ", args.numbers, 2, float)
    try:
        result = calculate(operator, a, b)
    except (ZeroDivisionError, ValueError) as exc:
        print(exc)
        return 1
    print(f"Result: {result:.2f}")
    return 0


def _factorial(args: argparse.Namespace) -> int:
    (n,) = _read("Enter a positive integer: ", args.number, 1, int)
    if n < 0:
        print("Factorial is not defined for negative numbers.")
        return 1
    print(f"Factorial of {n} = {factorial(n)}")
    return 0


def _prime(args: argparse.Namespace) -> int:
    (n,) = _read("Enter a positive integer: ", args.number, 1, int)
    verdict = "is" if is_prime(n) else "is not"
    print(f"{n} {verdict} a prime number.")
    return 0


def _pascal(args: argparse.Namespace) -> int:
    (rows,) = _read("Enter number of rows: ", args.rows, 1, int)
    print(format_pascal(rows), end="")
    return 0


def _hanoi(args: argparse.Namespace) -> int:
    (n,) = _read("Enter number of disks: ", args.disks, 1, int)
    print("Steps to solve Tower of Hanoi:")
    for disk, source, target in hanoi_moves(n, "A", "C", "B"):
        print(f"Move disk {disk} from {source} to {target}")
    return 0


def _stopwatch(args: argparse.Namespace) -> int:
    try:
        run_stopwatch(args.ticks)
    except KeyboardInterrupt:
        print()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classicprogs", description="Classic exercises.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("hello", help="greet the world").set_defaults(handler=None)

    p = commands.add_parser("sum", help="add two integers")
    p.add_argument("numbers", nargs="*")
    p.set_defaults(handler=_sum)

    p = commands.add_parser("calc", help="apply + - * / to two numbers")
    p.add_argument("operator", nargs="?")
    p.add_argument("numbers", nargs="*")
    p.set_defaults(handler=_calc)

    for name, handler, help_text in (
        ("factorial", _factorial, "factorial of an integer"),
        ("prime", _prime, "primality test"),
    ):
        p = commands.add_parser(name, help=help_text)
        p.add_argument("number", nargs="*")
        p.set_defaults(handler=handler)

    p = commands.add_parser("pascal", help="print Pascal's triangle")
    p.add_argument("rows", nargs="*")
    p.set_defaults(handler=_pascal)

    p = commands.add_parser("hanoi", help="solve the Tower of Hanoi")
    p.add_argument("disks", nargs="*")
    p.set_defaults(handler=_hanoi)

    p = commands.add_parser("stopwatch", help="count elapsed seconds")
    p.add_argument("--ticks", type=int, default=None, help="stop after this many seconds")
    p.set_defaults(handler=_stopwatch)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one exercise chosen by the first argument; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.handler is None:
        print(_GREETING)
        return 0
    try:
        return args.handler(args)
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())