# classicprogs

Classic beginner programming exercises as small Python functions and
classes. It covers primes, factorials, base conversions, string puzzles,
list and matrix exercises and a few bounded data structures. Use it as a
library, or run some of the exercises from the `classicprogs` command.

It has no dependencies beyond the standard library and needs Python 3.10 or
later.

## Installation

```
pip install .
```

To install pytest for running the tests as well, use `pip install .[test]`.

## Library

### `classicprogs.numbers`

- `is_even`, `is_prime` (trial division), `is_perfect`, `is_strong`
  (sum of digit factorials), `is_armstrong` and `is_palindrome_number`.
- `factorial(n)` raises `ValueError` for negative `n`.
- `fibonacci(n)` counts from `fibonacci(0) == 0`.
  `fibonacci_series(count)` returns the first `count` terms.
- `gcd` and `lcm` use Euclid's algorithm. `lcm(0, 0)` raises `ValueError`.
- `gcd_by_search` and `lcm_by_search` try candidates one by one. Both
  require positive arguments.
- `count_digits`, `reverse_number`, `sum_of_digits` and `power`.
  `power(base, exponent)` returns 1 when `exponent <= 0`.
- `trailing_zeros(n)` gives the number of trailing zeros of `n!` without
  computing the factorial.
- `sieve(limit)` returns the primes up to and including `limit`.

### `classicprogs.conversions`

- `to_base(n, base)` accepts a base from 2 to 16 and writes upper-case
  digits. It raises `ValueError` for a negative `n`.
- `decimal_to_binary`, `decimal_to_octal` and `decimal_to_hex` call
  `to_base` with bases 2, 8 and 16.
- `binary_to_decimal(binary)` reads a binary number written in decimal
  digits, so `1010` gives `10`.
- `roman_to_int(roman)` raises `ValueError` on a symbol that is not a Roman
  numeral.

### `classicprogs.text`

- `reverse` and `is_palindrome`. The palindrome check is case-sensitive.
- `count_vowels_consonants` returns `(vowels, consonants)`, counting ASCII
  letters only.
- `to_upper` converts only the ASCII letters `a` to `z`.
- `count_words` counts whitespace-separated words.
- `char_frequencies` returns character counts ordered by character code.
- `first_non_repeating` returns the first character that occurs exactly
  once, or `None`.
- `longest_word` returns the first longest space-separated word.
  `longest_palindrome` returns the first longest palindromic substring.
- `caesar_encrypt(text, key)` shifts letters and keeps their case.
- `are_anagrams(first, second)`.
- `precedence(op)` and `infix_to_postfix(expression)`. The conversion works
  on single-character operands and the operators `+ - * / ^`.

### `classicprogs.arrays`

- `second_largest(values)` returns the second largest distinct value. It
  returns `None` when there is none and raises `ValueError` on empty input.
- `merge_sorted(first, second)` merges two ascending sequences.
- `intersection(first, second)` keeps the elements of `first` that also
  appear in `second`.
- `most_frequent(values)` returns `(element, count)`. A tie goes to the
  element that appears first.
- `pairs_with_sum(values, target)` returns every pair, in index order, that
  adds up to `target`.
- `element_frequencies(values)` returns counts in order of first appearance.

### `classicprogs.matrices`

- `add`, `multiply` and `transpose` work on lists of rows. They raise
  `ValueError` when the shapes do not fit.
- `is_magic_square(matrix)` checks that the rows, the columns and both
  diagonals all share the first row's sum.
- `binomial(n, k)`, `pascal_triangle(rows)` and `format_pascal(rows)`.
  `format_pascal` returns the triangle as centred text.

### `classicprogs.structures`

- `Stack` and `Queue` hold up to 5 elements by default. So does
  `CircularQueue`.
- A `Queue` never reuses a slot. Once it has taken `capacity` elements it is
  full, even if some have since been dequeued.
- `CircularQueue` reuses freed slots.
- `MinHeap` holds up to 100 elements by default.
- `BinarySearchTree` ignores duplicate values. `inorder()` yields its
  values in ascending order.
- Adding to a full structure raises `StructureFullError`, a subclass of
  `OverflowError`.
- Taking from an empty one raises `StructureEmptyError`, a subclass of
  `IndexError`.
- All of the structures support `len()` and iteration. The tree also
  supports `in`.

### `classicprogs.puzzles`

- `largest_of_three(a, b, c)` and `swap(a, b)`.
- `calculate(operator, a, b)` takes one of `+ - * /`. It raises
  `ZeroDivisionError` on division by zero and `ValueError` for any other
  operator.
- `stopwatch_display(seconds)` formats elapsed time as
  `Stopwatch: HH:MM:SS`.
- `run_stopwatch(ticks=None)` clears the terminal and redraws the stopwatch
  once a second.
- `hanoi_moves(n, source="A", target="C", spare="B")` yields
  `(disk, from_rod, to_rod)` moves.

## Example

```python
from classicprogs.numbers import is_prime, sieve
from classicprogs.conversions import decimal_to_hex, roman_to_int
from classicprogs.text import infix_to_postfix
from classicprogs.structures import Stack

is_prime(31)               # True
sieve(30)                  # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
decimal_to_hex(255)        # 'FF'
roman_to_int("XLII")       # 42
infix_to_postfix("A+B*C")  # 'ABC*+'

stack = Stack()
stack.push(10)
stack.push(20)
stack.pop()                # 20
```

## Command line

The `classicprogs` command runs one exercise, chosen by a subcommand. Give
the values on the command line, or leave them out and the command will ask
for them on standard input.

```
classicprogs hello                    # Hello, World!
classicprogs sum 1 2                  # Sum: 3
classicprogs calc '*' 377.846 8.5     # Result: 3211.69
classicprogs factorial 7              # Factorial of 7 = 5040
classicprogs prime 31                 # 31 is a prime number.
classicprogs pascal 5                 # centred Pascal's triangle
classicprogs hanoi 3                  # the seven moves, one per line
classicprogs stopwatch --ticks 10     # runs until Ctrl-C without --ticks
```

Exit statuses:

- 1 when `calc` meets a division by zero or an unknown operator.
- 1 when `factorial` is given a negative number.
- 2 when the input is malformed or missing.

Run `classicprogs --help` for the full list.

## What it does not do

Only the exercises listed above are available from the command line. All
the others (conversions, text, arrays, matrices and the data structures)
are reached through the library alone.