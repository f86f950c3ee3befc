"""
String Builder

Strings are immutable, so repeated concatenation copies. io.StringIO gives a
mutable text buffer; StringBuilder wraps one with the usual editing verbs.
"""

import io

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class StringBuilder:
    """Mutable text buffer backed by io.StringIO."""

    def __init__(self, initial: str = ""):
        self._buffer = io.StringIO()
        self._buffer.write(initial)

    def append(self, value) -> "StringBuilder":
        self._buffer.write(str(value))
        return self

    def append_line(self, value: str = "") -> "StringBuilder":
        self._buffer.write(value + "\n")
        return self

    def append_format(self, template: str, *args, **kwargs) -> "StringBuilder":
        self._buffer.write(template.format(*args, **kwargs))
        return self

    def _reset(self, text: str) -> None:
        self._buffer = io.StringIO()
        self._buffer.write(text)

    def insert(self, index: int, value: str) -> "StringBuilder":
        text = self._buffer.getvalue()
        if not 0 <= index <= len(text):
            raise IndexError(f"Insert index {index} out of range for length {len(text)}")
        self._reset(text[:index] + value + text[index:])
        return self

    def replace(self, old: str, new: str) -> "StringBuilder":
        self._reset(self._buffer.getvalue().replace(old, new))
        return self

    def remove(self, start: int, length: int) -> "StringBuilder":
        text = self._buffer.getvalue()
        if start < 0 or length < 0 or start + length > len(text):
            raise IndexError(f"Cannot remove {length} chars at {start} from length {len(text)}")
        self._reset(text[:start] + text[start + length:])
        return self

    def clear(self) -> "StringBuilder":
        self._reset("")
        return self

    def substring(self, start: int, length: int) -> str:
        text = self._buffer.getvalue()
        if start < 0 or length < 0 or start + length > len(text):
            raise IndexError(f"Substring ({start}, {length}) out of range for length {len(text)}")
        return text[start:start + length]

    def __len__(self) -> int:
        return len(self._buffer.getvalue())

    def __str__(self) -> str:
        return self._buffer.getvalue()

    def __repr__(self) -> str:
        return f"StringBuilder({self._buffer.getvalue()!r})"


@register_demo("string_builder", "String Builder", DemoCategory.CONTAINERS)
def run() -> None:
    """Building text in an io.StringIO-backed buffer."""
    sb = StringBuilder()

    sb.append("Hello")
    sb.append_line(" World!")
    sb.insert(5, ",")
    sb.replace("World", "C#")
    sb.remove(0, 1)

    print(f"Length: {len(sb)}")      # 10
    print(str(sb), end="")           # ello, C#!

    sb.clear()
    print(f"Length after clear: {len(sb)}")

    sb.append_format("Number: {0}, String: {1}", 42, "test")
    print(sb)

    sb.replace("t", "T")
    print(sb)                        # Number: 42, STring: TesT

    sb.append("!")
    print(sb)

    chars = [" ", "A", "B", "C"]
    sb.append("".join(chars[1:4]))
    print(sb)                        # Number: 42, STring: TesT!ABC

    print(f"Substring (7,6): {sb.substring(7, 6)!r}")

    # Methods return the builder so calls chain
    chained = StringBuilder().append("a").append("b").append_line("c")
    print(repr(chained))

    # The idiomatic shortcut for many pieces is str.join
    print("-".join(str(n) for n in range(5)))
