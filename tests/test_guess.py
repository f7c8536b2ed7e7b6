import io
import random

from practicebox.guess import PROMPT, make_puzzle, play_the_game


def test_make_puzzle_ranges_and_answer():
    rng = random.Random(4)
    for _ in range(200):
        first, second, subtraction, answer = make_puzzle(rng)
        for value in (first, second, subtraction):
            assert 2 <= value <= 9
        assert answer == first * second - subtraction


def test_make_puzzle_reaches_both_bounds():
    rng = random.Random(8)
    firsts = {make_puzzle(rng)[0] for _ in range(300)}
    assert min(firsts) == 2
    assert max(firsts) == 9


def test_play_the_game_waits_five_times_and_reveals_answer():
    calls = []
    out = io.StringIO()

    def fake_input():
        calls.append(1)
        return "\n"

    result = play_the_game(3, 4, 5, 7, fake_input, out)
    assert result == 7
    assert len(calls) == 5
    text = out.getvalue()
    assert "Multipy your number by 3" + PROMPT in text
    assert "Now multipy the result by 4" + PROMPT in text
    assert "Now subtract 5" + PROMPT in text
    assert text.rstrip().endswith("The answer is:  7")


def test_play_the_game_opening_lines():
    out = io.StringIO()
    play_the_game(2, 2, 2, 2, lambda: "", out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Welcome to the Guess Number game!"
    assert lines[2] == "Think of a number between 1 and 10. " + PROMPT