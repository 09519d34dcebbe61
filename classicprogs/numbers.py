"""Integer puzzles: primes, factorials, digit tricks and friends."""

from __future__ import annotations

from collections.abc import Iterator


def _check_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers.")


def _check_positive(*values: int) -> None:
    if any(v <= 0 for v in values):
        raise ValueError("both numbers must be positive")


def _digits(n: int) -> list[int]:
    """Decimal digits of ``abs(n)``, most significant first."""
    return [int(ch) for ch in str(abs(n))]


def is_even(n: int) -> bool:
    """Return True when ``n`` is divisible by two."""
    return n % 2 == 0


def factorial(n: int) -> int:
    """Return ``n!``; negative ``n`` raises ValueError."""
    _check_non_negative(n, "Factorial")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def _fibonacci_terms() -> Iterator[int]:
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``fibonacci(0) == 0``."""
    _check_non_negative(n, "The Fibonacci sequence")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers (empty when ``count <= 0``)."""
    terms = _fibonacci_terms()
    return [next(terms) for _ in range(max(count, 0))]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def gcd_by_search(a: int, b: int) -> int:
    """Greatest common divisor found by testing every candidate up to ``min(a, b)``."""
    _check_positive(a, b)
    return max(i for i in range(1, min(a, b) + 1) if a % i == 0 and b % i == 0)


def lcm(a: int, b: int) -> int:
    """Least common multiple computed from the greatest common divisor."""
    if a == 0 and b == 0:
        raise ValueError("LCM of 0 and 0 is undefined")
    return abs(a * b) // gcd(a, b)


def lcm_by_search(a: int, b: int) -> int:
    """Least common multiple found by counting up from ``max(a, b)``."""
    _check_positive(a, b)
    candidate = max(a, b)
    while candidate % a or candidate % b:
        candidate += 1
    return candidate


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``; zero has one digit."""
    return len(str(abs(n)))


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_value = int(str(abs(n))[::-1])
    return -reversed_value if n < 0 else reversed_value


def is_palindrome_number(n: int) -> bool:
    """True when ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def is_armstrong(n: int) -> bool:
    """True when ``n`` equals the sum of its digits each raised to the digit count."""
    digits = _digits(n)
    width = len(digits)
    signed = [-d for d in digits] if n < 0 else digits
    return sum(d**width for d in signed) == n


def is_strong(n: int) -> bool:
    """True when ``n`` equals the sum of the factorials of its digits."""
    digits = _digits(n) if n > 0 else []
    return sum(factorial(d) for d in digits) == n


def is_perfect(n: int) -> bool:
    """True when ``n`` equals the sum of its proper divisors."""
    return sum(i for i in range(1, n // 2 + 1) if n % i == 0) == n


def power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 when ``exponent <= 0``."""
    return base**exponent if exponent > 0 else 1


def sum_of_digits(n: int) -> int:
    """Sum of the decimal digits of ``n``, carrying the sign of ``n``."""
    total = sum(_digits(n))
    return -total if n < 0 else total


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros in ``n!`` without computing the factorial."""
    count = 0
    divisor = 5
    while n // divisor >= 1:
        count += n // divisor
        divisor *= 5
    return count


def sieve(limit: int) -> list[int]:
    """All primes up to and including ``limit`` by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    p = 2
    while p * p <= limit:
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
        p += 1
    return [i for i, flag in enumerate(flags) if flag]