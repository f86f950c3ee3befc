"""Basics: arrays, math, functions, randomness, strings, conversions, exceptions."""

from . import arrays, maths, methods, randoms, strings, type_casting, exception_handling

__all__ = [
    "arrays",
    "maths",
    "methods",
    "randoms",
    "strings",
    "type_casting",
    "exception_handling",
]
