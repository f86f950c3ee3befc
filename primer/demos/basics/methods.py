"""
Functions

Defining and calling functions: parameters, return values, overloading by
type, default and keyword arguments, returning several values, variadic
arguments, recursion and one-line functions.
"""

from functools import singledispatch
from typing import Tuple

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def greet_user() -> None:
    print("Hello, User!")


def print_sum(x: int, y: int) -> None:
    print("Sum:", x + y)


def square(num: int) -> int:
    return num * num


# Python has no signature overloading; singledispatch picks an
# implementation from the type of the first argument.
@singledispatch
def multiply(x, y):
    raise TypeError(f"Unsupported type: {type(x).__name__}")


@multiply.register
def _(x: int, y: int) -> int:
    return x * y


@multiply.register
def _(x: float, y: float) -> float:
    return x * y


def display_user(name: str, age: int = 18) -> str:
    line = f"Name: {name}, Age: {age}"
    print(line)
    return line


def double_it(value: int) -> int:
    # ints are immutable: the caller rebinds the result
    return value * 2


def set_value() -> int:
    return 100


def min_max(*values: int) -> Tuple[int, int]:
    return min(values), max(values)


def print_numbers(*numbers: int) -> None:
    print(" ".join(str(n) for n in numbers))


def factorial(n: int) -> int:
    if n in (0, 1):
        return 1
    return n * factorial(n - 1)


def cube(x: int) -> int: return x * x * x


@register_demo("methods", "Functions", DemoCategory.BASICS)
def run() -> None:
    """Parameters, defaults, keyword arguments, *args and recursion."""
    # 1. Basic call
    greet_user()

    # 2. Parameters
    print_sum(10, 20)

    # 3. Return value
    print("Square:", square(5))

    # 4. Overloading by argument type
    print("Multiply int:", multiply(4, 5))          # 20
    print("Multiply float:", multiply(2.5, 3.5))    # 8.75

    # 5. Default and keyword arguments
    display_user("Alice")
    display_user("Bob", 25)
    display_user(age=30, name="Charlie")

    # 6. Results come back as return values, several at once as a tuple
    a = 5
    a = double_it(a)
    b = set_value()
    print("After double_it:", a)     # 10
    print("After set_value:", b)     # 100
    low, high = min_max(7, 3, 9)
    print(f"min_max -> low={low}, high={high}")

    # 7. Variable number of arguments
    print_numbers()
    print_numbers(1, 2, 3)
    print_numbers(10, 20, 30, 40, 50)
    values = [4, 5, 6]
    print_numbers(*values)

    # 8. Recursion
    print("Factorial of 5:", factorial(5))  # 120

    # 9. One-line function
    print("Cube:", cube(3))  # 27
