"""Vehicles built by composition, and animals behind a shared interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Vehicle:
    """What every vehicle has in common."""

    number_of_wheels: int
    number_of_passengers: int

    def details(self) -> str:
        return (
            f"Number of wheels: {self.number_of_wheels}\n"
            f"Number of passengers: {self.number_of_passengers}"
        )


@dataclass
class Car:
    """A car, holding the vehicle it is built on."""

    make: str
    model: str
    year: int
    is_electric: bool
    is_hybrid: bool
    vehicle: Vehicle

    def details(self) -> str:
        lines = [
            f"Make: {self.make}",
            f"Model: {self.model}",
            f"Year: {self.year}",
            f"Is Electric: {str(self.is_electric).lower()}",
            f"Is Hybrid: {str(self.is_hybrid).lower()}",
            self.vehicle.details(),
        ]
        return "\n".join(lines)


class Animal(ABC):
    """Anything that makes a sound and stands on legs."""

    @abstractmethod
    def says(self) -> str: ...

    @abstractmethod
    def how_many_legs(self) -> int: ...


@dataclass
class Dog(Animal):
    name: str
    sound: str
    number_of_legs: int

    def says(self) -> str:
        return self.sound

    def how_many_legs(self) -> int:
        return self.number_of_legs


@dataclass
class Cat(Animal):
    name: str
    sound: str
    number_of_legs: int
    has_tail: bool

    def says(self) -> str:
        return self.sound

    def how_many_legs(self) -> int:
        return self.number_of_legs


def riddle(animal: Animal) -> str:
    """Return a riddle describing the animal."""
    return f'This animal says "{animal.says()}" and has {animal.how_many_legs()} legs'


def main(argv: list[str] | None = None) -> int:
    suv = Vehicle(4, 5)
    volvo = Car("Volvo", "XC90", 2023, True, False, suv)
    print(volvo.details())
    print()
    tesla = Car("Tesla", "Model X", 2023, True, False, Vehicle(4, 7))
    print(tesla.details())

    print(riddle(Dog("Dog", "Woof", 4)))
    print(riddle(Cat("Cat", "Meow", 4, True)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())