"""
Arrays

Python has no fixed-size array in the language core; the list plays that
role. Covers creation, indexing, iteration, sorting, searching, copying,
rectangular and jagged nesting, and passing lists to and from functions.
"""

from typing import List

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def format_array(arr: List[int]) -> str:
    return " ".join(str(num) for num in arr)


def generate_array(size: int) -> List[int]:
    """Return [1, 2, ..., size]."""
    return list(range(1, size + 1))


def sum_array(arr: List[int]) -> int:
    total = 0
    for num in arr:
        total += num
    return total


@register_demo("arrays", "Arrays", DemoCategory.BASICS)
def run() -> None:
    """Lists used as arrays: indexing, sorting, nesting."""
    # 1. Declaration and initialization
    numbers1 = [0] * 5  # default values (0, 0, 0, 0, 0)
    numbers2 = [1, 2, 3, 4, 5]
    numbers3 = [10, 20, 30, 40, 50]

    print("Default Initialized:", format_array(numbers1))
    print("Literal:", format_array(numbers2))

    print("Accessing Elements:")
    print(numbers3[2])  # 30
    print("Last element via negative index:", numbers3[-1])  # 50

    # 2. Iteration
    print("Index Loop:")
    for i in range(len(numbers3)):
        print(numbers3[i], end=" ")
    print()

    print("For-each Loop:")
    for num in numbers3:
        print(num, end=" ")
    print()

    # 3. Properties
    print("Length:", len(numbers3))

    # 4. Sorting, reversing, searching, copying
    numbers3.sort()
    print("Sorted Array:")
    print(format_array(numbers3))

    numbers3.reverse()
    print("Reversed Array:")
    print(format_array(numbers3))

    print("Index of 30:", numbers3.index(30))  # 2

    copied = numbers3.copy()
    print("Copied Array:")
    print(format_array(copied))
    print("Copy is a different object:", copied is not numbers3)

    # 5. Rectangular (2-D) arrays
    multi = [[1, 2, 3], [4, 5, 6]]
    print("Multidimensional Array:")
    for row in multi:
        print(format_array(row))
    print(f"Dimensions: {len(multi)} x {len(multi[0])}")

    # Building one with a comprehension avoids aliasing the same row
    grid = [[0] * 3 for _ in range(2)]
    grid[0][0] = 9
    print("Independent rows:", grid)

    # 6. Jagged arrays: rows of different lengths
    jagged = [[1, 2, 3], [4, 5]]
    print("Jagged Array:")
    for row in jagged:
        print(format_array(row))

    # 7. Passing and returning arrays
    data = generate_array(5)
    print("Returned Array from Function:")
    print(format_array(data))  # 1 2 3 4 5
    print("Sum of Array:", sum_array(data))  # 15
