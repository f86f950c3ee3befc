"""
Interfaces

Two ways to describe a contract:
- An abstract base class: implementers inherit from it and may use its
  default methods. Forgetting an abstract member fails at instantiation.
- A Protocol: structural typing. Any object with the right members matches,
  no inheritance needed; runtime_checkable enables isinstance checks.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


class Appliance(ABC):
    @abstractmethod
    def turn_on(self) -> None:
        ...

    @property
    @abstractmethod
    def voltage(self) -> int:
        ...

    def status(self) -> None:
        """Default implementation, may be overridden."""
        print("Appliance is running.")
        self._log_internal()

    def _log_internal(self) -> None:
        print("Internal log from Appliance.")

    @staticmethod
    def show_category() -> None:
        print("This is a household appliance.")


@runtime_checkable
class Switchable(Protocol):
    def turn_on(self) -> None:
        ...


class Fan(Appliance):
    def __init__(self, voltage: int):
        self._voltage = voltage

    def turn_on(self) -> None:
        print(f"Fan turned on with voltage: {self._voltage}V")

    @property
    def voltage(self) -> int:
        return self._voltage

    def status(self) -> None:
        print("Fan is spinning at normal speed.")

    def oscillate(self) -> None:
        print("Fan is oscillating.")


class Lamp(Appliance):
    def turn_on(self) -> None:
        print("Lamp turned on.")

    @property
    def voltage(self) -> int:
        return 110


class Radio:
    """Not an Appliance, but still Switchable."""

    def turn_on(self) -> None:
        print("Radio turned on.")


@register_demo("interfaces", "Interfaces & Protocols", DemoCategory.OOP)
def run() -> None:
    """Abstract base classes versus structural protocols."""
    Appliance.show_category()

    appliance: Appliance = Fan(220)
    appliance.turn_on()
    appliance.status()
    print(f"Voltage: {appliance.voltage}")

    if isinstance(appliance, Fan):
        appliance.oscillate()

    # Lamp keeps the default status()
    Lamp().status()

    for device in (Fan(110), Radio()):
        print(f"{type(device).__name__} is Switchable: {isinstance(device, Switchable)}, "
              f"is Appliance: {isinstance(device, Appliance)}")

    try:
        Appliance()
    except TypeError as e:
        print("Cannot instantiate Appliance:", e)
