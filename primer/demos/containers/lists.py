"""
Lists

The list is Python's growable sequence. Covers adding, inserting, removing
by value, index and predicate, searching, slicing, sorting and conversion.
"""

from typing import Callable, List, Optional, TypeVar

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo

T = TypeVar("T")


def remove_all(items: List[T], predicate: Callable[[T], bool]) -> int:
    """Remove every item matching predicate in place. Returns how many went."""
    before = len(items)
    items[:] = [item for item in items if not predicate(item)]
    return before - len(items)


def find_last_index(items: List[T], predicate: Callable[[T], bool]) -> int:
    """Index of the last item matching predicate, or -1."""
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            return index
    return -1


def find(items: List[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """First item matching predicate, or None."""
    return next((item for item in items if predicate(item)), None)


@register_demo("lists", "Lists", DemoCategory.CONTAINERS)
def run() -> None:
    """Adding, removing, searching and sorting a list."""
    numbers: List[int] = []

    numbers.append(10)
    numbers.append(20)
    numbers.append(30)
    numbers.append(40)

    numbers.extend([50, 60])

    numbers.insert(2, 25)
    print("After inserts:", numbers)        # [10, 20, 25, 30, 40, 50, 60]

    numbers.remove(40)                       # by value, first occurrence
    numbers.pop(0)                           # by index
    removed = remove_all(numbers, lambda x: x > 55)
    print(f"After removals ({removed} by predicate):", numbers)  # [20, 25, 30, 50]

    print("Contains 30:", 30 in numbers)
    print("Index of 25:", numbers.index(25))
    print("Last index < 30:", find_last_index(numbers, lambda x: x < 30))
    print("First > 20:", find(numbers, lambda x: x > 20))
    print("All > 20:", [x for x in numbers if x > 20])
    print("Range [1:4]:", numbers[1:4])

    numbers.sort()
    numbers.reverse()
    print("Sorted descending:", numbers)

    as_tuple = tuple(numbers)
    print("As tuple:", as_tuple)

    string_list = [str(x) for x in numbers]
    print("Converted:", string_list)

    print("List elements:")
    for num in numbers:
        print(num)

    print(f"Count: {len(numbers)}")

    numbers.clear()
    print(f"Count after clear: {len(numbers)}")
