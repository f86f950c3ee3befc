"""
Polymorphism

Every method is virtual in Python: the object's class decides which
implementation runs, whatever the variable is annotated as.
"""

from typing import List

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class Shape:
    def __init__(self):
        self._name = "Generic Shape"

    @property
    def material(self) -> str:
        return "Plastic"

    def describe(self) -> None:
        print("I am a shape.")

    def who_am_i(self) -> None:
        print(f"I am a {self._name}")

    def basic_info(self) -> None:
        print(f"Material: {self.material}")

    def only_in_shape_method(self) -> None:
        print("Only shape class has this method")


class Triangle(Shape):
    def __init__(self, base_length: float = 4, height: float = 5):
        super().__init__()
        self._base_length = base_length
        self._height = height

    @property
    def material(self) -> str:
        return "Wood"

    def describe(self) -> None:
        self._name = "Triangle"
        print("A triangle has 3 sides.")

    def who_am_i(self) -> None:
        print(f"I am a specific shape: {self._name}")

    def area(self) -> float:
        area = 0.5 * self._base_length * self._height
        print(f"Area: {area}")
        return area


class Square(Shape):
    def describe(self) -> None:
        print("A square has 4 equal sides.")


@register_demo("polymorphism", "Polymorphism", DemoCategory.OOP)
def run() -> None:
    """Overriding and dynamic dispatch."""
    # Annotated as Shape, but Triangle's overrides run
    s: Shape = Triangle()
    s.describe()
    s.who_am_i()
    s.basic_info()              # Material: Wood
    s.only_in_shape_method()

    print("\n")

    t = Triangle()
    t.describe()
    t.who_am_i()
    t.basic_info()
    t.area()                    # Area: 10.0

    print()
    shapes: List[Shape] = [Shape(), Triangle(), Square()]
    for shape in shapes:
        shape.describe()

    # Duck typing: only the method matters
    print("Has area():", [hasattr(shape, "area") for shape in shapes])
