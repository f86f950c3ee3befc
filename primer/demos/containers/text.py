"""
Text

Working with str: formatting, raw literals, searching, slicing, splitting,
joining and emptiness checks.
"""

from typing import Optional

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def is_null_or_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def is_null_or_whitespace(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


@register_demo("text", "Working with Text", DemoCategory.CONTAINERS)
def run() -> None:
    """Formatting, splitting, joining and comparing strings."""
    # 1. Concatenation
    s1 = "Hello"
    s2 = "World"
    combined = s1 + " " + s2
    print("Concatenated: " + combined)

    # 2. f-strings
    name = "Prasu"
    age = 21
    print(f"Name: {name}, Age: {age}")

    # 3. Raw strings keep backslashes
    path = r"C:\Users\Prasu\Documents"
    print("Path: " + path)

    # 4. Methods
    text = "  Python Programming "
    print("Strip: " + text.strip())
    print("Upper: " + text.upper())
    print("Lower: " + text.lower())
    print("Contains 'thon':", "thon" in text)
    print("Startswith 'P':", text.strip().startswith("P"))
    print("Endswith 'ing':", text.strip().endswith("ing"))
    print("Find 'o':", text.find("o"))

    # 5. Slicing and replace
    print("Slice [2:7]: " + text[2:7])              # Pytho
    print("Replace: " + text.replace("Python", "Py"))

    # 6. Split and join
    sentence = "Python is fun to learn"
    words = sentence.split(" ")
    print("Split words:")
    for word in words:
        print(word)
    print("Joined with - : " + "-".join(words))

    # 7. Build large strings from parts instead of repeated +=
    parts = ["Smart", "Coding", "With", "Prasu"]
    print("Built: " + " ".join(parts))

    # 8. Number formatting
    print(f"Formatted: Total: {1234.56:,.2f}")      # 1,234.56
    print(f"Percent: {0.256:.1%}")                  # 25.6%
    print(f"Padded: [{42:>6}] [{42:<6}] [{42:06d}]")

    # 9. Equality
    a = "Test"
    b = "test"
    print("Equals:", a == b)
    print("Equals ignore case:", a.casefold() == b.casefold())

    # 10. Empty and whitespace
    print("is_null_or_empty(''):", is_null_or_empty(""))
    print("is_null_or_whitespace('   '):", is_null_or_whitespace("   "))
    print("is_null_or_empty(None):", is_null_or_empty(None))
