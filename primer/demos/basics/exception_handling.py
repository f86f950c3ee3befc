"""
Exception Handling

try / except / else / finally, matching several exception types, raising,
custom exception classes and chaining with ``raise ... from``.
"""

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class AgeValidationError(ValueError):
    """Raised when an age fails validation."""

    def __init__(self, age: int, minimum: int):
        super().__init__(f"Age must be at least {minimum}, got {age}.")
        self.age = age
        self.minimum = minimum


def validate_age(age: int) -> None:
    if age < 18:
        raise ValueError("Age must be at least 18.")
    print("Age is valid.")


def register_member(age: int) -> None:
    try:
        validate_age(age)
    except ValueError as e:
        raise AgeValidationError(age, 18) from e


@register_demo("exception_handling", "Exception Handling", DemoCategory.BASICS)
def run() -> None:
    """try/except/finally, raising and chaining."""
    # 1. Basic try-except
    try:
        x = 10
        y = 0
        x / y
    except ZeroDivisionError as ex:
        print("Caught Exception:", ex)

    # 2. Several except clauses, most specific first
    try:
        s = None
        print(s.upper())
    except AttributeError as ex:
        print("Caught AttributeError:", ex)
    except Exception as ex:
        print("Caught General Exception:", ex)

    # 3. else runs when nothing was raised, finally always runs
    try:
        print("Trying something risky...")
    except Exception:
        print("Something went wrong.")
    else:
        print("Nothing went wrong.")
    finally:
        print("Finally block always runs.")

    # 4. Raising
    try:
        validate_age(15)
    except ValueError as ex:
        print("Custom Throw:", ex)

    # 5. Custom exception with the original error chained
    try:
        register_member(12)
    except AgeValidationError as ex:
        print("Custom Exception:", ex)
        print("Caused by:", repr(ex.__cause__))

    # 6. One handler for several types
    for value in ["42", "abc", None]:
        try:
            print("Parsed:", int(value))
        except (ValueError, TypeError) as ex:
            print(f"Could not parse {value!r}: {type(ex).__name__}")
