"""String exercises: reversal, palindromes, counting, ciphers and expression parsing."""

from __future__ import annotations

import string
from collections import Counter

_VOWELS = frozenset("aeiou")
_ASCII_LOWER = frozenset(string.ascii_lowercase)
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_OPERAND_CHARS = frozenset(string.ascii_letters + string.digits)
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same forwards and backwards (case-sensitive)."""
    return text == text[::-1]


def count_vowels_consonants(text: str) -> tuple[int, int]:
    """Return ``(vowels, consonants)`` among the ASCII letters of ``text``."""
    letters = [ch for ch in text.lower() if ch in _ASCII_LOWER]
    vowels = sum(1 for ch in letters if ch in _VOWELS)
    return vowels, len(letters) - vowels


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters ``a``-``z``; everything else is left alone."""
    return text.translate(_UPPER_TABLE)


def count_words(text: str) -> int:
    """Number of whitespace-separated words in ``text``."""
    return len(text.split())


def char_frequencies(text: str) -> dict[str, int]:
    """Occurrences of each character, ordered by character code."""
    return dict(sorted(Counter(text).items()))


def first_non_repeating(text: str) -> str | None:
    """The first character that occurs exactly once, or None if there is none."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def longest_word(sentence: str) -> str:
    """The first of the longest space-separated words in ``sentence``."""
    return max(sentence.split(" "), key=len)


def longest_palindrome(text: str) -> str:
    """The first longest palindromic substring, found by expanding around centres."""
    if not text:
        return ""
    length = len(text)
    start, best = 0, 1

    def expand(low: int, high: int) -> None:
        nonlocal start, best
        while low >= 0 and high < length and text[low] == text[high]:
            if high - low + 1 > best:
                start, best = low, high - low + 1
            low -= 1
            high += 1

    for centre in range(length):
        expand(centre, centre)
        expand(centre, centre + 1)
    return text[start : start + best]


def _shift(ch: str, key: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((ord(ch) - base + key) % 26 + base)


def caesar_encrypt(text: str, key: int) -> str:
    """Shift each ASCII letter ``key`` places through the alphabet, keeping case."""
    return "".join(_shift(ch, key) for ch in text)


def are_anagrams(first: str, second: str) -> bool:
    """True when both strings hold exactly the same characters."""
    return Counter(first) == Counter(second)


def precedence(op: str) -> int:
    """Binding strength of an operator: ``+ -`` 1, ``* /`` 2, ``^`` 3, anything else 0."""
    return _PRECEDENCE.get(op, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch in _OPERAND_CHARS:
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)