"""
Generics

typing.Generic and TypeVar let a container declare the type it holds so type
checkers can follow it. At runtime the list accepts anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    value: T
    next: Optional[Node[T]] = None


class CustomLinkedList(Generic[T]):
    """Singly linked list with O(1) append."""

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0

    def add(self, value: T) -> None:
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size

    def print(self) -> None:
        for value in self:
            print(value)


@register_demo("generics", "Generics", DemoCategory.OOP)
def run() -> None:
    """A generic linked list used with int and str."""
    int_list: CustomLinkedList[int] = CustomLinkedList()
    int_list.add(10)
    int_list.add(20)
    int_list.add(30)

    print("Integer Linked List:")
    int_list.print()

    string_list: CustomLinkedList[str] = CustomLinkedList()
    string_list.add("Apple")
    string_list.add("Banana")
    string_list.add("Cherry")

    print("\nString Linked List:")
    string_list.print()

    print(f"\nLengths: {len(int_list)} and {len(string_list)}")
    print("Sum of ints:", sum(int_list))
    print("Joined strings:", ", ".join(string_list))
