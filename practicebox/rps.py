"""Rock, paper, scissors against the computer on the console."""

from __future__ import annotations

import enum
import random
import sys

from practicebox.terminal import clear_screen


class Choice(enum.Enum):
    """A hand that can be played."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def label(self) -> str:
        return self.name.lower()


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.SCISSORS: Choice.PAPER,
    Choice.PAPER: Choice.ROCK,
}

_CLASHES = {
    frozenset({Choice.ROCK, Choice.SCISSORS}): "Rock beats scissors!",
    frozenset({Choice.SCISSORS, Choice.PAPER}): "Scissors beats paper!",
    frozenset({Choice.PAPER, Choice.ROCK}): "Paper beats rock!",
}


def parse_choice(text: str) -> Choice:
    """Turn typed text into a choice; raise ValueError if it names none."""
    word = text.strip()
    for choice in Choice:
        if word == choice.label:
            return choice
    raise ValueError(f"invalid choice: {word!r}")


def computer_choice(rng: random.Random | None = None) -> Choice:
    """Pick the computer's hand at random."""
    rng = rng or random.Random()
    return Choice(rng.randrange(len(Choice)))


def determine_winner(player: Choice, computer: Choice) -> str:
    """Return 'tie', 'win' or 'lose' from the player's point of view."""
    if player is computer:
        return "tie"
    return "win" if _BEATS[player] is computer else "lose"


def verdict(player: Choice, computer: Choice) -> str:
    """Return the sentence announcing the outcome of a round."""
    outcome = determine_winner(player, computer)
    if outcome == "tie":
        return "It's a tie!"
    return f"{_CLASHES[frozenset((player, computer))]} You {outcome}!"


def main(argv: list[str] | None = None) -> int:
    computer = computer_choice()
    clear_screen()
    print("Please enter rock, paper, or scissors ->", end="", flush=True)
    line = sys.stdin.readline()
    try:
        player: Choice | None = parse_choice(line)
    except ValueError:
        player = None
        print("Invalid choice")
    print(f"Computer chose {computer.label}")
    if player is not None:
        print(verdict(player, computer))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())