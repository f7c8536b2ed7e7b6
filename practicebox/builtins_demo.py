"""Working with records, references, lists and dictionaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Automobile:
    """A car with a make, a model and a year."""

    make: str
    model: str
    year: int
    luxury: bool = False

    def describe(self) -> str:
        return f"Car: {self.make} {self.model} {self.year}"


def delete_from_list(items: list, index: int) -> list:
    """Overwrite items[index] with the last item and return all but the last.

    The given list is changed in place; the returned list is a new one.
    """
    items[index] = items[-1]
    return items[:-1]


def sum_many(*args: int) -> int:
    """Return the sum of all the arguments."""
    return sum(args)


def _is_sorted(items: list[str]) -> bool:
    return all(a <= b for a, b in zip(items, items[1:]))


def main(argv: list[str] | None = None) -> int:
    car = Automobile("Toyota", "Corolla", 2020)
    print(f"{{{car.make} {car.model} {car.year} {str(car.luxury).lower()}}}")
    print(car.describe(), end="")

    box = [10]
    print("Value of x:", box[0])
    print("Address of x:", hex(id(box)))

    def change_value(ref: list[int]) -> None:
        ref[0] = 20

    change_value(box)
    print("Value of x after changeValueOfPointer:", box[0])

    animals = [
        "dog", "cat", "bird", "fish", "lizard",
        "snake", "turtle", "frog", "hamster",
    ]
    print("Animals slice:", "[" + " ".join(animals) + "]")
    for animal in animals:
        print(animal)
    print("First two animals are", "[" + " ".join(animals[:2]) + "]")
    print(len(animals))
    print(str(_is_sorted(animals)).lower())
    animals.sort()
    print("Sorted animals slice:", "[" + " ".join(animals) + "]")
    print(str(_is_sorted(animals)).lower())
    delete_from_list(animals, 2)
    print("Animals slice after deletion:", "[" + " ".join(animals) + "]")

    numbers = {"one": 1, "two": 2, "three": 3, "four": 4}
    for key, value in numbers.items():
        print("Key:", key, "Value:", value)
    del numbers["two"]
    for key, value in numbers.items():
        print("Afrer deletion:")
        print("Key:", key, "Value:", value)

    if "one" in numbers:
        print("Key 'one' exists with value:", numbers["one"])
    else:
        print("Key 'one' does not exist")

    print(sum_many(1, 1, 1, 2, 2, 3, 4, 5, 6, 7, 8, 9, 10))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())