"""
Dictionaries

dict is Python's hash map. Keys keep insertion order.
"""

from typing import Dict, Hashable, Any

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def try_add(mapping: Dict[Hashable, Any], key: Hashable, value: Any) -> bool:
    """Add key only if it is missing. True if the value was stored."""
    if key in mapping:
        return False
    mapping[key] = value
    return True


@register_demo("dicts", "Dictionaries", DemoCategory.CONTAINERS)
def run() -> None:
    """Adding, updating, looking up and iterating a dict."""
    mapping: Dict[int, str] = {}

    mapping[1] = "One"
    mapping[2] = "Two"
    mapping[3] = "Three"

    # Assignment both updates and inserts
    mapping[2] = "Two Updated"
    mapping[4] = "Four"

    has_key3 = 3 in mapping
    has_value_five = "Five" in mapping.values()
    print(f"Has key 3: {has_key3}, has value 'Five': {has_value_five}")

    val1 = mapping.get(1)
    if val1 is not None:
        print(f"Key 1 has value: {val1}")

    mapping.pop(4)

    print(f"Count: {len(mapping)}")

    for key in mapping.keys():
        print(key)

    for value in mapping.values():
        print(value)

    for key, value in mapping.items():
        print(f"{key} = {value}")

    # Missing keys raise KeyError with [], get() returns a default instead
    try:
        mapping[99]
    except KeyError as e:
        print("KeyError for key", e)

    count_greater_than_one = sum(1 for key in mapping if key > 1)
    print(f"Keys > 1 count: {count_greater_than_one}")

    mapping.clear()
    print(f"Count after clear: {len(mapping)}")

    iterator = iter(mapping.items())
    for key, value in iterator:
        print(f"[Iterator] {key} = {value}")

    added = try_add(mapping, 5, "Five")
    print(f"try_add key 5 success: {added}")

    mapping[1] = "One"
    added = try_add(mapping, 1, "One New")
    print(f"try_add key 1 success: {added}")

    # setdefault inserts only when the key is missing and returns the stored value
    print("setdefault(1):", mapping.setdefault(1, "Ignored"))

    val_or_default = mapping.get(10)
    print(f"Value for key 10: {val_or_default}")

    squares = {n: n * n for n in range(1, 4)}
    print("Comprehension:", squares)
