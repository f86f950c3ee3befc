"""Object-oriented programming: the four pillars plus generics and records."""

from . import abstraction, classes, generics, inheritance, interfaces, polymorphism, structs

__all__ = [
    "abstraction",
    "classes",
    "generics",
    "inheritance",
    "interfaces",
    "polymorphism",
    "structs",
]
