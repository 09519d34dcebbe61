"""Classic beginner programming exercises: numbers, conversions, text, arrays,
matrices, small data structures and puzzles, with a command line front end."""

__version__ = "0.1.0"