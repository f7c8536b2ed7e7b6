import math

import pytest

from practicebox.basics import (
    Worker,
    advance_clock,
    describe_workers,
    expression_report,
    operator_results,
)


def test_describe_source_workers():
    jack = Worker("Jack White", 30, 50000, True)
    joe = Worker("Joe Black", 25, 40000, False)
    assert describe_workers([jack, joe]) == [
        "Full time employee: Jack White",
        "Junior employee: Jack White",
        "Part time employee: Joe Black",
        "Junior employee: Joe Black",
    ]


@pytest.mark.parametrize(
    "age, salary",
    [(31, 10), (20, 50001)],
)
def test_senior_by_age_or_salary(age, salary):
    lines = describe_workers([Worker("Ann", age, salary, False)])
    assert lines[1] == "Senior employee: Ann"


def test_describe_nobody():
    assert describe_workers([]) == []


@pytest.mark.parametrize("age, teen", [(12, "false"), (13, "true"), (19, "true"), (20, "false")])
def test_teenager_bounds(age, teen):
    report = expression_report(age)
    assert report[0] == f"Age: {age}"
    assert report[-1] == f"Is Teenager: {teen}"


def test_expression_report_fixed_lines():
    report = expression_report(10)
    assert report[1:3] == ["Name: John", "Right Handed: true"]


def test_integer_operators():
    results = operator_results()
    assert results["answer"] == 13
    assert results["answer3"] == 10


def test_float_operators():
    results = operator_results()
    assert isinstance(results["answer4"], float)
    assert results["answer5"] < results["answer"]
    assert math.isclose(results["area"] / 25, math.pi)


@pytest.mark.parametrize("minute, second", [(1, 31), (59, 59), (59, 0), (3, 58)])
def test_clock_unchanged(minute, second):
    assert advance_clock(minute, second) == (minute, second)


@pytest.mark.parametrize("minute", [0, 1, 58])
def test_clock_rolls_over(minute):
    assert advance_clock(minute, 59) == (minute + 1, 0)