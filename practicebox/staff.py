"""Office staff records and salary bands."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

OVERPAID_SALARY = 70000
UNDERPAID_SALARY = 60000


@dataclass
class Employee:
    """One member of staff."""

    first_name: str
    last_name: str
    salary: int
    full_time: bool


EMPLOYEES = [
    Employee("John", "Doe", 50000, True),
    Employee("Jane", "Smith", 60000, False),
    Employee("Alice", "Johnson", 70000, True),
    Employee("Bob", "Brown", 80000, False),
]


def _select(
    staff: list[Employee], keep: Callable[[Employee], bool]
) -> list[Employee]:
    log.info("This is a log function")
    return [emp for emp in staff if keep(emp)]


@dataclass
class Office:
    """All the staff working in one office."""

    all_staff: list[Employee] = field(default_factory=list)

    def all(self) -> list[Employee]:
        """Return every member of staff."""
        return self.all_staff

    def overpaid(self) -> list[Employee]:
        """Return the staff earning at least the overpaid salary."""
        return _select(self.all_staff, lambda emp: emp.salary >= OVERPAID_SALARY)

    def underpaid(self) -> list[Employee]:
        """Return the staff earning at most the underpaid salary."""
        return _select(self.all_staff, lambda emp: emp.salary <= UNDERPAID_SALARY)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(message)s", stream=sys.stderr
    )
    office = Office(list(EMPLOYEES))
    log.info("%s", office.all())
    log.info("%s", office.overpaid())
    log.info("%s", office.underpaid())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())