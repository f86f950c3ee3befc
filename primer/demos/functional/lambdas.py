"""
Lambdas

Anonymous single-expression functions, nested functions for multi-statement
bodies, higher-order functions and closures.
"""

from typing import Callable

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def multiplier(factor: int) -> Callable[[int], int]:
    return lambda x: x * factor


def power(exponent: int) -> Callable[[int], int]:
    def raise_to(base: int) -> int:
        result = 1
        for _ in range(exponent):
            result *= base
        return result
    return raise_to


@register_demo("lambdas", "Lambdas & Closures", DemoCategory.FUNCTIONAL)
def run() -> None:
    """Lambdas, closures and higher-order functions."""
    # 1. One parameter
    square = lambda x: x * x  # noqa: E731
    print("Square of 5:", square(5))                   # 25

    # 2. Several parameters
    add = lambda a, b: a + b  # noqa: E731
    print("Add 3 + 4:", add(3, 4))                     # 7

    # 3. Lambdas hold one expression; use def for statements
    def multiply_and_add(a: int, b: int) -> int:
        product = a * b
        return product + 10
    print("Multiply 3 * 4 + 10:", multiply_and_add(3, 4))  # 22

    # 4. No parameters
    greet = lambda: print("Hello Lambda!")  # noqa: E731
    greet()

    # 5. Returning a function
    multiply_by_3 = multiplier(3)
    print("Multiply 10 by 3:", multiply_by_3(10))      # 30

    # 6. Closures look the variable up when called, not when created
    factor = 5
    multiply_by_factor = lambda x: x * factor  # noqa: E731
    print("Multiply 10 by captured factor (5):", multiply_by_factor(10))   # 50
    factor = 10
    print("Multiply 10 by changed factor (10):", multiply_by_factor(10))   # 100

    # Late binding in a loop; a default argument freezes the value
    late = [lambda: i for i in range(3)]
    frozen = [lambda i=i: i for i in range(3)]
    print("Late binding:", [f() for f in late])        # [2, 2, 2]
    print("Frozen with default:", [f() for f in frozen])  # [0, 1, 2]

    # 7. With filter and map
    numbers = [1, 2, 3, 4, 5, 6]
    evens = filter(lambda n: n % 2 == 0, numbers)
    print("Even numbers:", ", ".join(map(str, evens)))
    squares = map(lambda n: n * n, numbers)
    print("Squares:", ", ".join(map(str, squares)))

    # As a sort key
    names = ["bob", "Alice", "carol"]
    print("Sorted case-insensitively:", sorted(names, key=lambda s: s.lower()))

    # 8. Side effects
    def print_with_prefix(name: str) -> None:
        prefix = "[Name]"
        print(f"{prefix} {name}")
    print_with_prefix("Alice")

    # 9. Function factories
    square_func = power(2)
    cube_func = power(3)
    print("5 squared:", square_func(5))                # 25
    print("2 cubed:", cube_func(2))                    # 8
