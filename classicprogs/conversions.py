"""Conversions between number bases and from Roman numerals."""

from __future__ import annotations

_DIGITS = "0123456789ABCDEF"

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def to_base(n: int, base: int) -> str:
    """Write the non-negative integer ``n`` in ``base`` (2 to 16), upper-case digits."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def decimal_to_binary(n: int) -> str:
    """Binary digits of ``n``."""
    return to_base(n, 2)


def decimal_to_octal(n: int) -> str:
    """Octal digits of ``n``."""
    return to_base(n, 8)


def decimal_to_hex(n: int) -> str:
    """Hexadecimal digits of ``n``, upper case."""
    return to_base(n, 16)


def binary_to_decimal(binary: int | str) -> int:
    """Value of a binary number written with decimal digits, e.g. ``1010`` -> 10.

    Each decimal digit is weighted by a power of two, as read right to left.
    """
    number = int(binary)
    sign = -1 if number < 0 else 1
    digits = str(abs(number))[::-1]
    return sign * sum(int(d) * 2**i for i, d in enumerate(digits))


def roman_to_int(roman: str) -> int:
    """Value of a Roman numeral; a smaller symbol before a larger one is subtracted."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in roman]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    it = iter(values)
    current = next(it, None)
    while current is not None:
        following = next(it, None)
        if following is not None and current < following:
            total += following - current
            current = next(it, None)
        else:
            total += current
            current = following
    return total