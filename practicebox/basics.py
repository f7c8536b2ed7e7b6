"""Comparisons, expressions, operators and variable scope."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

GLOBAL_ONE = "One"
PUBLIC_VAR = "This is a public variable"
_private_var = "This is a private variable"


@dataclass
class Worker:
    """A person on the payroll."""

    name: str
    age: int
    salary: int
    full_time: bool


def _go_float(value: float) -> str:
    mantissa, exponent = f"{value:+.6e}".split("e")
    return f"{mantissa}e{int(exponent):+04d}"


def describe_workers(workers: list[Worker]) -> list[str]:
    """Return two lines per worker: working hours and seniority."""
    lines = []
    for worker in workers:
        kind = "Full" if worker.full_time else "Part"
        lines.append(f"{kind} time employee: {worker.name}")
        rank = "Senior" if worker.age > 30 or worker.salary > 50000 else "Junior"
        lines.append(f"{rank} employee: {worker.name}")
    return lines


def expression_report(age: int) -> list[str]:
    """Return the lines describing a person of the given age."""
    return [
        f"Age: {age}",
        "Name: John",
        f"Right Handed: {str(True).lower()}",
        f"Age in 10 years: {age + 10}",
        f"Is Teenager: {str(13 <= age <= 19).lower()}",
    ]


def operator_results() -> dict[str, float]:
    """Return the values of the operator precedence examples."""
    return {
        "answer": 7 + 3 * 2 - 1 // 5,
        "answer2": 7 + 3 * 2 - 1 % 5,
        # XOR binds like addition here, so it is applied first, left to right.
        "answer3": (7 ^ 2) + 3 * 2 - 1 % 5,
        "answer4": math.pow(7, 2) + 3 * 2 - 1 % 5,
        "area": math.pi * 5 * 5,
        "answer5": 7 + 3 * 2 - 1 / 5.0,
    }


def advance_clock(minute: int, second: int) -> tuple[int, int]:
    """Move to the next minute when the second would pass 59."""
    if minute < 59 and second + 1 > 59:
        return minute + 1, 0
    return minute, second


def main(argv: list[str] | None = None) -> int:
    apple, banana = 18, 9
    print(str(apple == banana).lower())
    print(str(apple != banana).lower())
    print(str(apple > banana).lower())
    workers = [
        Worker("Jack White", 30, 50000, True),
        Worker("Joe Black", 25, 40000, False),
    ]
    for line in describe_workers(workers):
        print(line)

    for line in expression_report(10):
        print(line)

    for value in operator_results().values():
        text = _go_float(value) if isinstance(value, float) else str(value)
        print(text, file=sys.stderr)
    minute, second = advance_clock(1, 31)
    print(minute, second, file=sys.stderr)

    one = "this is a block level variable"
    print(one)
    print(GLOBAL_ONE)
    print(PUBLIC_VAR)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())