"""String basics: case, searching, comparing, slicing and replacing."""

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def compare(a: str, b: str) -> int:
    """Ordinal comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


def insert(text: str, index: int, value: str) -> str:
    """Strings are immutable, so inserting builds a new one."""
    return text[:index] + value + text[index:]


@register_demo("strings", "String Basics", DemoCategory.BASICS)
def run() -> None:
    """Common str methods."""
    str1 = "Hello"
    str2 = "World"
    str3 = "hello world"

    concat = str1 + " " + str2
    print(concat)                                    # Hello World
    print(concat.upper())                            # HELLO WORLD
    print(concat.lower())                            # hello world
    print(len(str1))                                 # 5
    print("World" in concat)                         # True
    print(concat.startswith("He"))                   # True
    print(concat.endswith("ld"))                     # True
    print(str1.find("o"))                            # 4
    print(str1.find("z"))                            # -1, index() would raise
    print("   padded string   ".strip())             # padded string
    print(compare(str1, str3))                       # -1 ('H' < 'h')
    print(str1.casefold() == str3.casefold())        # False

    print(insert(str3, 0, "inserint"))               # inserinthello world
    print(concat[6:6 + 5])                           # World
    print(concat.replace("World", "Python"))         # Hello Python
