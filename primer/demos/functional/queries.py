"""
Queries

Query-style operations over sequences: projection, filtering, ordering,
grouping, aggregation, paging and joining. Comprehensions and generator
expressions cover most of it; itertools fills the gaps.
"""

from itertools import groupby, islice
from typing import Iterable, List, TypeVar

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo

T = TypeVar("T")

NUMBERS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 324, 4, 534, -5345, -5]
WORDS = ["csharp", "java", "science", "IT", "LINQ", "123"]


def distinct(items: Iterable[T]) -> List[T]:
    """Unique items, first occurrence order kept."""
    return list(dict.fromkeys(items))


def page(items: Iterable[T], skip: int, take: int) -> List[T]:
    return list(islice(items, skip, skip + take))


@register_demo("queries", "Query Expressions", DemoCategory.FUNCTIONAL)
def run() -> None:
    """Select, where, order by, group by and aggregates."""
    # select
    selected = [word for word in WORDS]
    print("Select:", selected)

    # select with projection
    print("Upper:", [word.upper() for word in WORDS])

    # where
    where = [i for i in NUMBERS if i > 5]
    print("Where > 5:", where)

    # order by / order by descending
    print("Order by:", sorted(NUMBERS))
    print("Order by descending:", sorted(NUMBERS, reverse=True))
    print("Order by length then text:", sorted(WORDS, key=lambda w: (len(w), w)))

    # group by; groupby needs input sorted on the same key
    by_length = sorted(WORDS, key=len)
    for length, group in groupby(by_length, key=len):
        print(f"Length {length}: {list(group)}")

    # quantifiers and aggregates
    print("Any negative:", any(n < 0 for n in NUMBERS))
    print("All non-zero:", all(n != 0 for n in NUMBERS))
    print("Count even:", sum(1 for n in NUMBERS if n % 2 == 0))
    print(f"Sum: {sum(NUMBERS)}, Min: {min(NUMBERS)}, Max: {max(NUMBERS)}")

    # element operators
    print("First > 100:", next((n for n in NUMBERS if n > 100), None))
    print("First > 10000 or default:", next((n for n in NUMBERS if n > 10000), None))

    # set-like and paging
    print("Distinct:", distinct(NUMBERS))
    print("Skip 2 take 3:", page(NUMBERS, 2, 3))

    # join
    scores = {"java": 7, "csharp": 9, "LINQ": 8}
    joined = [(word, scores[word]) for word in WORDS if word in scores]
    print("Joined:", joined)
    print("Zipped:", list(zip(WORDS, NUMBERS)))

    # generator expressions are lazy, like deferred queries
    lazy = (n * n for n in NUMBERS if n > 0)
    print("First two squares:", list(islice(lazy, 2)))
