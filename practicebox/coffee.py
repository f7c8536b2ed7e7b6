"""A keypress-driven coffee menu."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from practicebox.terminal import read_key

COFFEES = {
    1: "Cappuccino",
    2: "Latte",
    3: "Espresso",
    4: "Americano",
    5: "Mocha",
    6: "Macchiato",
}

_DIGIT = re.compile(r"[0-9]")
_RULE = "-" * 40


def menu() -> str:
    """Return the menu as shown to the customer."""
    lines = ["MENU", _RULE]
    lines += [f"{number} - {name}" for number, name in COFFEES.items()]
    lines += ["Q - Quit", _RULE]
    return "\n".join(lines)


def choose(key: str) -> str:
    """Return the coffee a key selects, or an empty string for none."""
    number = int(key) if _DIGIT.fullmatch(key) else 0
    return COFFEES.get(number, "")


def run(read_key: Callable[[], str], out: TextIO) -> list[str]:
    """Show the menu and take orders until 'q' or 'Q'; return what was chosen."""
    print(menu(), file=out, flush=True)
    chosen = []
    while True:
        key = read_key()
        if not key:
            raise EOFError("no more input")
        if key in ("q", "Q"):
            print("Exiting program...", file=out)
            return chosen
        coffee = choose(key)
        print(f"You chose {coffee}", file=out, flush=True)
        chosen.append(coffee)


def main(argv: list[str] | None = None) -> int:
    try:
        run(read_key, sys.stdout)
    except EOFError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())