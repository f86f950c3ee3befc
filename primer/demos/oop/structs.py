"""
Records

Python has no value types; every variable holds a reference. A dataclass
gives a compact record with generated __init__, __repr__ and __eq__. Copying
is explicit (copy.copy or dataclasses.replace), and frozen=True makes an
immutable record.
"""

import copy
from dataclasses import dataclass, replace

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


@dataclass
class Employee:
    id: int
    name: str
    salary: float

    @property
    def role(self) -> str:
        return "Developer"

    def display_info(self) -> None:
        print(f"ID: {self.id}")
        print(f"Name: {self.name}")
        print(f"Salary: {self.salary:.0f}")
        print(f"Role: {self.role}")

    def __str__(self) -> str:
        return f"[Employee] {self.id} - {self.name} - {self.salary:.0f}"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@register_demo("structs", "Records & Value Semantics", DemoCategory.OOP)
def run() -> None:
    """Dataclasses, copying and frozen records."""
    emp1 = Employee(101, "Alice", 60000)
    emp2 = Employee(id=102, name="Bob", salary=55000)

    emp1.display_info()
    print(str(emp2))

    emp2.salary += 5000
    print(f"Updated Salary of Bob: {emp2.salary:.0f}")

    # Assignment shares the object
    alias = emp1
    alias.salary = 61000
    print("Alias changed the original:", emp1.salary == 61000)

    # Copies are independent
    snapshot = copy.copy(emp1)
    snapshot.salary = 1
    print("Copy left the original alone:", emp1.salary == 61000)

    promoted = replace(emp1, salary=70000)
    print("replace() ->", promoted)
    print("Equal by value:", Employee(1, "X", 1) == Employee(1, "X", 1))

    origin = Point(0, 0)
    try:
        origin.x = 5
    except AttributeError as e:
        print("Frozen record:", type(e).__name__)
    print("Points hash by value:", hash(Point(1, 2)) == hash(Point(1, 2)))
