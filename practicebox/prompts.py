"""Asking the user for typed values and echoing them back."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from practicebox.terminal import read_key

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


@dataclass
class User:
    """What the user told us about themselves."""

    user_name: str
    age: int
    favorite_number: float
    owns_dog: bool

    def summary(self) -> str:
        return (
            f"Your name is: {self.user_name} and your age is: {self.age} "
            f"and your favorite number is: {self.favorite_number:.2f}. "
            f"Owns a dog: {str(self.owns_dog).lower()}."
        )


def _ask(question: str, input_fn: Callable[[], str], out: TextIO) -> str:
    print(question, file=out)
    print("-> ", end="", file=out, flush=True)
    return input_fn().strip()


def read_string(question: str, input_fn: Callable[[], str], out: TextIO) -> str:
    """Ask until a non-blank answer is given and return it trimmed."""
    while True:
        answer = _ask(question, input_fn, out)
        if answer:
            return answer
        print("Please enter a valid input", file=out)


def read_int(question: str, input_fn: Callable[[], str], out: TextIO) -> int:
    """Ask until a whole number is given and return it."""
    while True:
        answer = _ask(question, input_fn, out)
        if _WHOLE_NUMBER.fullmatch(answer):
            return int(answer)
        print("Please enter a whole number", file=out)


def _parse_float(text: str) -> float:
    if _SPECIAL.fullmatch(text):
        return float(text)
    if _HEX_FLOAT.fullmatch(text):
        return float.fromhex(text)
    if _DECIMAL.fullmatch(text):
        value = float(text)
        if math.isinf(value):
            raise ValueError(f"value out of range: {text!r}")
        return value
    raise ValueError(f"not a number: {text!r}")


def read_float(question: str, input_fn: Callable[[], str], out: TextIO) -> float:
    """Ask until a number is given and return it."""
    while True:
        answer = _ask(question, input_fn, out)
        try:
            return _parse_float(answer)
        except ValueError:
            print("Please enter a whole number", file=out)


def read_bool(question: str, read_key: Callable[[], str], out: TextIO) -> bool:
    """Ask until 'y' or 'n' is pressed, either case, and return the answer."""
    while True:
        print(question, file=out)
        print("-> ", end="", file=out, flush=True)
        key = read_key()
        if not key:
            raise EOFError("no more input")
        if key in ("y", "Y"):
            return True
        if key in ("n", "N"):
            return False
        print("Please enter a valid input", file=out)


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


def main(argv: list[str] | None = None) -> int:
    out = sys.stdout
    try:
        user = User(
            user_name=read_string("Enter your name:", _read_line, out),
            age=read_int("Enter your age:", _read_line, out),
            favorite_number=read_float("Enter your favorite number:", _read_line, out),
            owns_dog=read_bool("Do you own a dog? (y/n):", read_key, out),
        )
    except EOFError:
        return 1
    print(user.summary(), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())