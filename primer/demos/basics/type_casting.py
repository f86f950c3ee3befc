"""
Type Conversion

Python never narrows a value behind your back. Mixing int and float in
arithmetic widens to float; every other conversion is an explicit call to
the target type's constructor.
"""

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def type_name(value) -> str:
    return type(value).__name__


def to_bool(text: str) -> bool:
    """
    Parse a boolean from text.

    bool("false") is True because any non-empty string is truthy, so
    parsing has to look at the content.

    Raises:
        ValueError: If the text is anything but "true" or "false" (any case)
    """
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"String was not recognized as a valid boolean: {text!r}")


@register_demo("type_casting", "Type Conversion", DemoCategory.BASICS)
def run() -> None:
    """Implicit widening and explicit conversions."""
    # IMPLICIT: arithmetic widens int to float
    widened = 12 + 0.34
    print(widened, type_name(widened))               # 12.34 float

    # A character is a length-1 string; ord() gives its code point
    ch = "A"
    print(ord(ch))                                   # 65
    print(chr(66))                                   # B

    # ints are arbitrary precision, there is no int -> long step
    large = 1000 * 10 ** 20
    print(large, type_name(large))

    is_active = True
    active_str = str(is_active)
    print(active_str, type_name(active_str))         # True str

    x_str = str(100)
    print(x_str, type_name(x_str))                   # 100 str

    # EXPLICIT
    a = 3.140934691
    print(int(a))                                    # 3, truncates toward zero
    print(int(-3.9))                                 # -3
    print(round(3.6))                                # 4

    c = "@"
    print(c, type_name(c))                           # @ str

    f = to_bool("true")
    print(f, type_name(f))                           # True bool
    print("bool('false') is", bool("false"))         # True!

    d2 = 56.789
    print(f"{d2:.2f}")                               # 56.79

    num = int("123")
    print(num, type_name(num))                       # 123 int

    try:
        int("12.5")
    except ValueError as e:
        print("Conversion failed:", e)
