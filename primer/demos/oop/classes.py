"""
Classes

Python has no access modifiers. A leading underscore marks an attribute as
internal by convention; two leading underscores trigger name mangling so a
subclass cannot clash with it by accident. Class attributes are shared by
every instance; properties wrap attribute access in methods.
"""

from datetime import datetime
from typing import ClassVar, Final

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class A:
    counter: ClassVar[int] = 0   # shared across all instances
    TAG: Final = "Python"        # constant by convention, checked by type checkers

    def __init__(self, id: int = 1, text: str = "default"):
        self.id = id                     # public
        self.__text = text               # name-mangled to _A__text
        if (id, text) == (1, "default"):
            self._amount = 10.5          # internal by convention
            self.is_available = True
            self._grade = "A"
            self._score = 9.5
        else:
            self._amount = 99.9
            self.is_available = False
            self._grade = "B"
            self._score = 7.0
        A.counter += 1
        self._number = A.counter
        self._created_at = datetime.now()

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = value

    @property
    def text(self) -> str:
        return self.__text

    @text.setter
    def text(self, value: str) -> None:
        self.__text = value

    @property
    def summary(self) -> str:
        return f"ID: {self.id}, Text: {self.__text}"

    @property
    def created_at(self) -> datetime:
        # read-only: no setter
        return self._created_at

    @property
    def amount(self) -> float:
        return self._amount

    @amount.setter
    def amount(self, value: float) -> None:
        self._amount = value

    @property
    def grade(self) -> str:
        return self._grade

    @grade.setter
    def grade(self, value: str) -> None:
        if len(value) != 1:
            raise ValueError("grade must be a single character")
        self._grade = value

    def show(self) -> None:
        print("ID:", self.id)
        print("Text:", self.__text)
        print("Amount:", self._amount)
        print("Available:", self.is_available)
        print("Grade:", self._grade)
        print("Score:", self._score)
        print("Tag:", self.TAG)
        print("Created:", self._created_at.strftime("%Y-%m-%d %H:%M:%S"))
        print("Number:", self.number)
        print("Summary:", self.summary)

    @classmethod
    def show_counter(cls) -> None:
        print("Total Objects:", cls.counter)

    def __repr__(self) -> str:
        return f"A(id={self.id!r}, text={self.__text!r})"


@register_demo("classes", "Classes", DemoCategory.OOP)
def run() -> None:
    """Attributes, properties, class attributes and name mangling."""
    A.counter = 0
    obj1 = A()
    obj2 = A(2, "custom")

    obj1.show()
    obj2.show()

    A.show_counter()

    obj1.text = "updated"
    obj1.amount = 100.0
    obj1.grade = "Z"

    print("After Updates:")
    obj1.show()

    try:
        obj1.created_at = datetime.now()
    except AttributeError:
        print("created_at is read-only")

    print("Mangled name is still reachable:", obj1._A__text)
    print(repr(obj2))
