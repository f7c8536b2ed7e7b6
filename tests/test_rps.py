import io
import random
import sys
from unittest import mock

import pytest

from practicebox.rps import (
    Choice,
    computer_choice,
    determine_winner,
    main,
    parse_choice,
    verdict,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rock\n", Choice.ROCK),
        ("  paper  ", Choice.PAPER),
        ("scissors\r\n", Choice.SCISSORS),
    ],
)
def test_parse_choice_accepts_names(text, expected):
    assert parse_choice(text) is expected


@pytest.mark.parametrize("text", ["Rock", "lizard", "", "rocks"])
def test_parse_choice_rejects_other_text(text):
    with pytest.raises(ValueError):
        parse_choice(text)


def test_same_hands_tie():
    for choice in Choice:
        assert determine_winner(choice, choice) == "tie"


def test_winner_is_antisymmetric():
    for a in Choice:
        for b in Choice:
            if a is b:
                continue
            first = determine_winner(a, b)
            second = determine_winner(b, a)
            assert {first, second} == {"win", "lose"}


def test_each_hand_beats_exactly_one_other():
    for a in Choice:
        wins = [b for b in Choice if determine_winner(a, b) == "win"]
        assert len(wins) == 1


def test_verdict_messages():
    assert verdict(Choice.ROCK, Choice.SCISSORS) == "Rock beats scissors! You win!"
    assert verdict(Choice.SCISSORS, Choice.ROCK) == "Rock beats scissors! You lose!"
    assert verdict(Choice.PAPER, Choice.ROCK) == "Paper beats rock! You win!"
    assert verdict(Choice.ROCK, Choice.PAPER) == "Paper beats rock! You lose!"
    assert verdict(Choice.PAPER, Choice.PAPER) == "It's a tie!"


def test_computer_choice_covers_all_hands():
    rng = random.Random(5)
    seen = {computer_choice(rng) for _ in range(200)}
    assert seen == set(Choice)


def test_computer_choice_is_reproducible():
    first = [computer_choice(random.Random(9)) for _ in range(3)]
    second = [computer_choice(random.Random(9)) for _ in range(3)]
    assert first == second


@mock.patch("subprocess.run")
def test_main_plays_a_round(run, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("paper\n"))
    assert main([]) == 0
    printed = capsys.readouterr().out
    assert "Please enter rock, paper, or scissors ->" in printed
    assert "Computer chose " in printed
    assert "Invalid choice" not in printed
    assert run.called


@mock.patch("subprocess.run")
def test_main_reports_invalid_choice(run, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("banana\n"))
    assert main([]) == 0
    printed = capsys.readouterr().out
    assert "Invalid choice" in printed
    assert "You win!" not in printed
    assert "You lose!" not in printed
    assert "It's a tie!" not in printed