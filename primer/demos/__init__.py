"""
Primer Demos

The demo catalogue. Each demo module exposes a zero-argument ``run()`` that
prints its walkthrough to stdout; importing this package registers them all.

BASICS        arrays, maths, methods, randoms, strings, type_casting, exception_handling
CONTAINERS    lists, dicts, sets, text, string_builder
FUNCTIONAL    delegates, events, lambdas, queries
OOP           abstraction, classes, generics, inheritance, interfaces, polymorphism, structs
CONCURRENCY   async_await, table_sync, threads
TIMEKEEPING   datetimes, timespans
"""

from .registry import (
    DemoEntry,
    register_demo,
    get_demo,
    list_demos,
    run_demo,
    run_all,
    capture_demo,
)

# Importing the subpackages registers their demos
from . import basics, containers, functional, oop, concurrency, timekeeping  # noqa: E402,F401

__all__ = [
    "DemoEntry",
    "register_demo",
    "get_demo",
    "list_demos",
    "run_demo",
    "run_all",
    "capture_demo",
]
