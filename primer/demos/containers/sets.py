"""Sets and set algebra."""

from typing import Iterable

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def format_set(items: Iterable[int]) -> str:
    # Sorted so the output is stable; sets themselves are unordered
    return " ".join(str(item) for item in sorted(items))


@register_demo("sets", "Sets", DemoCategory.CONTAINERS)
def run() -> None:
    """Membership, union, intersection and differences."""
    numbers = set()

    numbers.add(10)
    numbers.add(20)
    numbers.add(30)
    numbers.add(20)  # duplicate ignored

    print(f"Contains 20: {20 in numbers}")

    numbers.remove(10)  # discard() would not raise for a missing item
    print(f"Count: {len(numbers)}")

    numbers.clear()
    print(f"Count after clear: {len(numbers)}")

    numbers |= {1, 2, 3, 4, 5}
    other = {4, 5, 6, 7}

    numbers |= other
    print("After Union:")
    print(format_set(numbers))          # 1 2 3 4 5 6 7

    numbers &= {2, 3, 4, 8}
    print("After Intersection:")
    print(format_set(numbers))          # 2 3 4

    numbers -= {3}
    print("After Difference:")
    print(format_set(numbers))          # 2 4

    numbers ^= {2, 9}
    print("After Symmetric Difference:")
    print(format_set(numbers))          # 4 9

    print("Subset:", {4}.issubset(numbers))
    print("Frozen sets are hashable:", hash(frozenset(numbers)) == hash(frozenset({9, 4})))
