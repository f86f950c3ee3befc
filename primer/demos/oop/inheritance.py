"""
Inheritance

Multilevel: Child1 -> Parent -> GrandParent.
Hierarchical: Child2 also derives from Parent.
super().__init__() runs the base initializer; Python does not call it for you.
"""

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class GrandParent:
    def __init__(self):
        self.__private_note = "Private GrandParent Data"
        self._legacy = "Protected Legacy"
        self.surname = "Hirpara"
        print("GrandParent constructor called")

    def show_grand_parent(self) -> None:
        print("Public Method: GrandParent")

    def _show_protected(self) -> None:
        print("Protected Method: GrandParent")


class Parent(GrandParent):
    def __init__(self):
        super().__init__()
        self._advice = "Protected Parent Advice"
        self.house = "Owns a House"
        print("Parent constructor called")

    def show_parent(self) -> None:
        print("Public Method: Parent")
        print("Accessing base protected: " + self._legacy)
        print("Accessing base public: " + self.surname)
        # self.__private_note would look up _Parent__private_note and fail


class Child1(Parent):
    def __init__(self):
        super().__init__()
        self.child_toy = "Remote Car"
        print("Child1 constructor called")

    def show_child1(self) -> None:
        print("Public Method: Child1")
        print("Accessing inherited protected: " + self._advice)
        print("Accessing inherited public: " + self.surname)


class Child2(Parent):
    def __init__(self):
        super().__init__()
        self.__pet_name = "Buddy"
        print("Child2 constructor called")

    def show_child2(self) -> None:
        print("Public Method: Child2")
        print("Accessing inherited protected: " + self._advice)
        print("Accessing inherited public: " + self.surname)
        self._show_protected()


@register_demo("inheritance", "Inheritance", DemoCategory.OOP)
def run() -> None:
    """Multilevel and hierarchical inheritance."""
    print("=== Child1 (Multilevel) ===")
    c1 = Child1()
    c1.show_grand_parent()
    c1.show_parent()
    c1.show_child1()

    print("\n=== Child2 (Hierarchical) ===")
    c2 = Child2()
    c2.show_grand_parent()
    c2.show_parent()
    c2.show_child2()

    print("\nMethod resolution order:", " -> ".join(cls.__name__ for cls in Child1.__mro__))
    print("isinstance(c2, GrandParent):", isinstance(c2, GrandParent))
    print("issubclass(Child2, Child1):", issubclass(Child2, Child1))
