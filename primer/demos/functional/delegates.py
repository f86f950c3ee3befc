"""
Delegates

Functions are first-class objects: they can be stored, passed and called
later. MulticastDelegate keeps an ordered invocation list of callables and
calls all of them when invoked.
"""

from __future__ import annotations

from typing import Any, Callable, List, Tuple

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class MulticastDelegate:
    """
    Ordered list of callables invoked together.

    Usage:
        greet = MulticastDelegate(hello)
        greet += goodbye
        greet("Ada")        # calls hello("Ada") then goodbye("Ada")
        greet -= hello
    """

    def __init__(self, *handlers: Callable[..., Any]):
        self._handlers: List[Callable[..., Any]] = list(handlers)

    def __iadd__(self, handler: Callable[..., Any]) -> MulticastDelegate:
        if isinstance(handler, MulticastDelegate):
            self._handlers.extend(handler._handlers)
        else:
            self._handlers.append(handler)
        return self

    def __isub__(self, handler: Callable[..., Any]) -> MulticastDelegate:
        self._handlers = self._without(handler)
        return self

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Invoke every handler in order; returns the last handler's result."""
        result = None
        for handler in list(self._handlers):
            result = handler(*args, **kwargs)
        return result

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)

    @property
    def invocation_list(self) -> Tuple[Callable[..., Any], ...]:
        return tuple(self._handlers)

    def _without(self, value: Callable[..., Any]) -> List[Callable[..., Any]]:
        """Handlers with the last occurrence of value removed."""
        target = value._handlers if isinstance(value, MulticastDelegate) else [value]
        size = len(target)
        if size == 0:
            return list(self._handlers)
        for start in range(len(self._handlers) - size, -1, -1):
            if self._handlers[start:start + size] == target:
                return self._handlers[:start] + self._handlers[start + size:]
        return list(self._handlers)

    @classmethod
    def combine(cls, *delegates: Callable[..., Any]) -> MulticastDelegate:
        """New delegate invoking each argument's handlers in order."""
        combined = cls()
        for delegate in delegates:
            combined += delegate
        return combined

    @classmethod
    def remove(cls, source: MulticastDelegate, value: Callable[..., Any]) -> MulticastDelegate:
        """New delegate equal to source minus the last occurrence of value."""
        return cls(*source._without(value))


def greet(name: str) -> None:
    print("Greet : " + name)


def farewell(name: str) -> None:
    print("Goodbye, " + name)


def welcome(name: str) -> None:
    print("Welcome, " + name)


def apply(operation: Callable[[int, int], int], a: int, b: int) -> int:
    return operation(a, b)


@register_demo("delegates", "Delegates", DemoCategory.FUNCTIONAL)
def run() -> None:
    """Functions as values and multicast invocation lists."""
    print("=== FUNCTIONS AS VALUES ===")
    say = greet
    say("Prasu")
    print("apply(max, 3, 9) =", apply(max, 3, 9))

    print("\n=== MULTICAST DELEGATE ===")
    delegate = MulticastDelegate(greet)
    delegate += farewell
    delegate += welcome
    delegate("Ashok")

    delegate -= greet

    print("\n=== INVOCATION LIST ===")
    print(f"Number of functions attached: {len(delegate)}")
    for handler in delegate.invocation_list:
        print("Function name: " + handler.__name__)

    combined = MulticastDelegate.combine(MulticastDelegate(greet), MulticastDelegate(farewell))
    combined("Combined Delegate")

    combined = MulticastDelegate.remove(combined, farewell)
    print("\nAfter removing farewell:")
    combined("After Removal")
