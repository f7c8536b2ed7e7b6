"""A ten-year corporate management game about mining bitcoin."""

from __future__ import annotations

import random
import re
import sys
from typing import Callable, TextIO

from practicebox.terminal import clear_screen, read_key

OGH = "O Great Gill Bates"

_RED = "31"
_YELLOW = "33"
_MAGENTA = "35"
_CYAN = "36"
_WHITE = "37"

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")

INTRODUCTION = """BITCOIN MINER
-------------
Congratulations! You are the newest CEO of Make Me Rich, Inc, elected for a ten year term. Your
duties are to dispense living expenses for employees, direct mining of bitcoin, and buy and sell
computers as needed to support the corporation.

Watch out for hackers and market crashes!

Cash is the general currency, measured in bitcoins.

The following will help you in your decisions:

\t* Each employee needs at least 20 bitcoins converted to cash per year to survive
\t* Each employee can maintain at most 10 computers
\t* It takes 2 bitcoins to pay for electricity to mine bitcoin on a computer
\t* The market price for computers fluctuates yearly

Lead the team wisely and you will be showered with appreciation at the end of your term.

Do it poorly and you will be terminated!

"""


def _div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


class BitcoinMiner:
    """The state of one corporation and the turns that change it."""

    def __init__(
        self,
        rng: random.Random | None = None,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
        clear: Callable[[], None] | None = None,
        color: bool | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.input_fn = input_fn or _read_line
        self.out = out or sys.stdout
        self.clear = clear or clear_screen
        if color is None:
            isatty = getattr(self.out, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

        self.year = 1
        self.employees = 100
        self.cash = 2800
        self.computers = 1000
        self.computer_price = 0
        self.computers_maintained = 0
        self.cash_paid_to_employees = 0
        self.starved = 0
        self.market_crash_victims = 0
        self.new_employees = 5
        self.cash_mined = 3000
        self.bitcoin_per_computer = 3
        self.amount_stolen_by_hackers = 200

    def _say(self, text: str = "", colour: str | None = None) -> None:
        if colour and self.color:
            text = f"\x1b[{colour}m{text}\x1b[0m"
        print(text, file=self.out, flush=True)

    def _jest(self, message: str) -> None:
        self._say()
        self._say(f"{OGH}, you are dreaming!", _MAGENTA)
        self._say(message)

    def play(self) -> None:
        """Play until the term of ten years ends or the player is thrown out."""
        self.clear()
        self._say(INTRODUCTION, _YELLOW)

        still_in_office = True
        while still_in_office and self.year <= 10:
            self.update_computer_price()
            self._say(self.summary())
            self.buy_computers()
            self.sell_computers()
            self.pay_employees()
            self.maintain_computers()
            self.market_crash_victims = self.check_for_crash()
            self.employees -= self.market_crash_victims

            if self.count_starved_employees() >= 45:
                still_in_office = False

            self.new_employees = self.count_new_hires()
            self.employees += self.new_employees
            self.cash += self.mine_bitcoin(self.computers_maintained)
            self.check_for_hackers()
            self.update_computer_price()
            self.year += 1

        self.clear()
        colour, text = self._final_score()
        self._say(text, colour)

    def update_computer_price(self) -> int:
        """Set a new computer price between 17 and 26 and return it."""
        self.computer_price = self.rng.randrange(10) + 17
        return self.computer_price

    def summary(self) -> str:
        """Return the report shown at the start of each year."""
        lines = [f"{OGH}!", f"You are in year {self.year} of your rule."]
        if self.market_crash_victims > 0:
            lines.append(self._paint(
                f"A terrible market crash wiped out {self.market_crash_victims} of your team.",
                _RED,
            ))
        lines += [
            f"In the previous year, {self.starved} of your team starved to death.",
            f"In the previous year, {self.new_employees} employee(s) got employed by the corporation.",
            f"The employee head count is now {self.employees}.",
            f"We mined {self.cash_mined} bitcoins at {self.bitcoin_per_computer} bitcoins per computer.",
        ]
        if self.amount_stolen_by_hackers > 0:
            lines.append(self._paint(
                f"*** Hackers stole {self.amount_stolen_by_hackers} bitcoins, "
                f"leaving {self.cash} bitcoins in your online wallet.",
                _RED,
            ))
        else:
            lines.append(f"We have {self.cash} bitcoins of cash in storage.")
        lines += [
            f"The corporation owns {self.computers} computers for mining.",
            f"Computers currently cost {self.computer_price} bitcoins each.",
            "",
        ]
        return "\n".join(lines)

    def _paint(self, text: str, colour: str) -> str:
        return f"\x1b[{colour}m{text}\x1b[0m" if self.color else text

    def _report_holdings(self) -> None:
        self._say(f"{OGH}, you now have {self.computers} computers")
        self._say(f"and {self.cash} bitcoins of cash.")

    def buy_computers(self) -> int:
        """Ask how many computers to buy and pay for them; return the number bought."""
        question = "How many computers will you buy?"
        to_buy = self.get_number(question)
        cost = self.computer_price * to_buy
        while cost > self.cash:
            self._jest(f"We have but {self.cash} bitcoins of cash, not {cost}!")
            to_buy = self.get_number(question)
            cost = self.computer_price * to_buy
        self.cash -= cost
        self.computers += to_buy
        self._report_holdings()
        return to_buy

    def sell_computers(self) -> int:
        """Ask how many computers to sell and collect the money; return the number sold."""
        question = "How many computers will you sell?"
        to_sell = self.get_number(question)
        while to_sell > self.computers:
            self._jest(f"The corporation only has {self.computers} computers!")
            to_sell = self.get_number(question)
        self.computers -= to_sell
        self.cash += self.computer_price * to_sell
        self._report_holdings()
        return to_sell

    def pay_employees(self) -> int:
        """Ask how much to pay the employees and take it from the cash."""
        question = "How much bitcoin will you distribute to the employees?"
        self.cash_paid_to_employees = self.get_number(question)
        while self.cash_paid_to_employees > self.cash:
            self._jest(f"We have but {self.cash} bitcoins!")
            self.cash_paid_to_employees = self.get_number(question)
        self.cash -= self.cash_paid_to_employees
        self._say(f"{OGH}, {self.cash} bitcoins remain.")
        return self.cash_paid_to_employees

    def maintain_computers(self) -> int:
        """Ask how much to spend on maintenance; return the computers maintained."""
        question = "How many bitcoins will you allocate for maintenance?"
        while True:
            amount = self.get_number(question)
            if amount > self.cash:
                self._jest(f"We have but {self.cash} bitcoins left!")
            elif amount > 2 * self.computers:
                self._jest(f"We have but {self.computers} computers available for mining!")
            elif amount > 20 * self.employees:
                self._jest(f"We have but {self.employees} people to maintain the computers!")
            else:
                break
        self.computers_maintained = _div(amount, 2)
        self._say(f"{OGH}, we now have {self.cash} bitcoins in storage.")
        return self.computers_maintained

    def check_for_crash(self) -> int:
        """Roll for a market crash and return how many employees it takes."""
        if self.rng.randint(1, 99) <= 15:
            self._say(
                "*** A terrible market crash wipes out half of the corporation's employees! ***",
                _RED,
            )
            return _div(self.employees, 2)
        return 0

    def count_new_hires(self) -> int:
        """Return how many people join the corporation this year."""
        if self.starved > 0:
            return 0
        return _div(20 * self.computers + self.cash, 100 * self.employees) + 1

    def check_for_hackers(self) -> int:
        """Roll for hackers, take what they steal and return the amount."""
        if self.rng.randint(1, 99) < 40:
            percent = 10 + self.rng.randrange(21)
            self._say(f"*** Hackers steal {percent} percent of your bitcoins! ***", _RED)
            self.amount_stolen_by_hackers = _div(percent * self.cash, 100)
            self.cash -= self.amount_stolen_by_hackers
        else:
            self.amount_stolen_by_hackers = 0
        return self.amount_stolen_by_hackers

    def mine_bitcoin(self, computers: int) -> int:
        """Mine with the given computers and return the bitcoins produced."""
        self.bitcoin_per_computer = self.rng.randrange(6) + 1
        self.cash_mined = self.bitcoin_per_computer * computers
        return self.cash_mined

    def count_starved_employees(self) -> int:
        """Remove the unpaid employees and return the percentage who starved."""
        paid = _div(self.cash_paid_to_employees, 20)
        if paid >= self.employees:
            self.starved = 0
            self._say("The corporation's employees are well fed and happy.")
            return 0
        self.starved = self.employees - paid
        self._say(f"{self.starved} employees starved to death.", _RED)
        percent = _div(100 * self.starved, self.employees)
        self.employees -= self.starved
        return percent

    def _final_score(self) -> tuple[str, str]:
        if self.starved >= _div(45 * self.employees, 100):
            return _RED, (
                f"O Once-Great {OGH},\n"
                f"{self.starved} of your team starved during the last year of your incompetent reign!\n"
                "The few who remain hacked your bank account and changed your password, "
                "effectively evicting you!\n\n"
                "Your final rating: TERRIBLE."
            )
        score = min(self.computers, 20 * self.employees)
        if score < 600:
            return _CYAN, (
                f"Congratulations, {OGH}.\n"
                "You have ruled wisely,  but not well. You have led your people through ten difficult\n"
                f"years, but your corporation assets have shrunk to a mere {self.computers} computers.\n\n"
                "Your final rating: ADEQUATE"
            )
        if score < 800:
            return _YELLOW, (
                f"Congratulations {OGH},\n"
                "You  have ruled wisely, and shown the online world that it's possible "
                "to make money in cryptocurrency.\n\n"
                "Your final rating: GOOD."
            )
        return _WHITE, (
            f"Congratulations {OGH},\n"
            "you  have ruled wisely and well, and expanded your holdings while keeping your team happy.\n"
            "Altogether, a most impressive job!\n\n"
            "Your final rating: SUPERB."
        )

    def final_rating(self) -> str:
        """Return the verdict given at the end of the term."""
        return self._final_score()[1]

    def get_number(self, question: str) -> int:
        """Ask the question until a whole number is entered, and return it."""
        while True:
            self._say(question)
            print("-> ", end="", file=self.out, flush=True)
            text = self.input_fn().replace("\r\n", "").replace("\n", "")
            if _WHOLE_NUMBER.fullmatch(text):
                return int(text)
            self._say("Please enter a whole number!")


def get_yes_or_no(
    question: str, read_key: Callable[[], str], out: TextIO
) -> bool:
    """Ask the question and return False only for 'n' or 'N'."""
    print(question, file=out, flush=True)
    key = read_key()
    if not key:
        raise EOFError("no more input")
    return key not in ("n", "N")


def main(argv: list[str] | None = None) -> int:
    miner = BitcoinMiner()
    try:
        play_again = True
        while play_again:
            miner.play()
            play_again = get_yes_or_no(
                "Would you like to play again (y/n)?", read_key, sys.stdout
            )
    except EOFError:
        return 1
    print("")
    print("Goodbye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())