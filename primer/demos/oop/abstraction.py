"""
Abstraction

An abstract base class describes an incomplete concept. It cannot be
instantiated until a subclass implements every abstract member. It can still
carry an __init__, concrete methods, overridable methods and static helpers.
"""

from abc import ABC, abstractmethod

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class Vehicle(ABC):
    def __init__(self, model_name: str):
        self._model = model_name

    @property
    def model(self) -> str:
        return self._model

    @property
    @abstractmethod
    def wheels(self) -> int:
        """Number of wheels, supplied by each subclass."""

    @abstractmethod
    def start_engine(self) -> None:
        """Start the engine."""

    def stop_engine(self) -> None:
        print("Engine stopped.")

    def honk(self) -> None:
        print("Default horn sound.")

    @staticmethod
    def show_vehicle_info() -> None:
        print("Vehicles are used for transportation.")


class Car(Vehicle):
    @property
    def wheels(self) -> int:
        return 4

    def start_engine(self) -> None:
        print(f"{self._model} car engine started.")

    def honk(self) -> None:
        print(f"{self._model} car horn: Beep beep!")


@register_demo("abstraction", "Abstraction", DemoCategory.OOP)
def run() -> None:
    """Abstract base classes with abc.ABC."""
    Vehicle.show_vehicle_info()

    car: Vehicle = Car("Honda")

    print(f"{car.model} has {car.wheels} wheels.")
    car.start_engine()
    car.honk()
    car.stop_engine()

    try:
        Vehicle("Generic")
    except TypeError as e:
        print("Cannot instantiate Vehicle:", e)
