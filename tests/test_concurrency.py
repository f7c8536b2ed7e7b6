import logging
import queue
import random
import threading

import pytest

from practicebox.concurrency import listen_for_log, roll_until_small, run_tasks


def test_tasks_arrive_in_finishing_order():
    assert run_tasks([0.3, 0.0]) == ["Task 2 completed", "Task 1 completed"]


def test_no_tasks():
    assert run_tasks([]) == []


def test_all_tasks_reported():
    result = run_tasks([0.0, 0.01, 0.02])
    assert sorted(result) == ["Task 1 completed", "Task 2 completed", "Task 3 completed"]


def test_listen_logs_each_message(caplog):
    logger = logging.getLogger("practicebox.test.listener")
    with caplog.at_level(logging.INFO, logger="practicebox.test.listener"):
        count = listen_for_log(["first\n", "second"], logger)
    assert count == 2
    assert [r.getMessage() for r in caplog.records] == ["first", "second"]


def test_listen_from_queue_in_thread(caplog):
    channel = queue.Queue()
    results = []
    with caplog.at_level(logging.INFO, logger="practicebox.concurrency"):
        listener = threading.Thread(
            target=lambda: results.append(listen_for_log(iter(channel.get, None)))
        )
        listener.start()
        channel.put("hello")
        channel.put(None)
        listener.join()
    assert results == [1]
    assert [r.getMessage() for r in caplog.records] == ["hello"]


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_rolls_stop_at_first_small_value(seed):
    rolls = roll_until_small(random.Random(seed), 100)
    assert rolls[-1] <= 100
    assert all(roll > 100 for roll in rolls[:-1])
    assert all(1 <= roll <= 1000 for roll in rolls)


def test_high_limit_needs_no_rolls():
    assert roll_until_small(random.Random(3), 1000) == []


@pytest.mark.parametrize("seed", [5, 11])
def test_default_limit_is_one_hundred(seed):
    rolls = roll_until_small(random.Random(seed))
    assert rolls == roll_until_small(random.Random(seed), 100)
    assert rolls[-1] <= 100
    assert all(roll > 100 for roll in rolls[:-1])