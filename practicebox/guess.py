"""A number trick where the program guesses the result of the player's sums."""

from __future__ import annotations

import random
import sys
from typing import Callable, TextIO

PROMPT = " and don't type your number in, just press enter when ready."
_RULE = "------------------------------------------------------"


def make_puzzle(rng: random.Random | None = None) -> tuple[int, int, int, int]:
    """Return the two multipliers, the subtraction and the resulting answer."""
    rng = rng or random.Random()
    first = rng.randrange(8) + 2
    second = rng.randrange(8) + 2
    subtraction = rng.randrange(8) + 2
    return first, second, subtraction, first * second - subtraction


def play_the_game(
    first_number: int,
    second_number: int,
    subtraction: int,
    answer: int,
    input_fn: Callable[[], str],
    out: TextIO,
) -> int:
    """Walk the player through the trick and reveal the answer, which is returned."""

    def step(text: str) -> None:
        print(text, end="", file=out, flush=True)
        input_fn()

    print("Welcome to the Guess Number game!", file=out)
    print(_RULE, file=out)
    print("Think of a number between 1 and 10.", PROMPT, file=out, flush=True)
    input_fn()
    print(_RULE, file=out)
    step(f"Multipy your number by {first_number}{PROMPT}")
    step(f"Now multipy the result by {second_number}{PROMPT}")
    step(f"Now divide the result by the number you originally thought of{PROMPT}")
    step(f"Now subtract {subtraction}{PROMPT}")
    print(_RULE, file=out)
    print("The answer is: ", answer, file=out)
    return answer


def main(argv: list[str] | None = None) -> int:
    play_the_game(*make_puzzle(), sys.stdin.readline, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())