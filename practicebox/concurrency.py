"""Waiting on concurrent tasks, logging from a listener thread and random loops."""

from __future__ import annotations

import argparse
import logging
import queue
import random
import sys
import threading
import time
from typing import Iterable, Sequence

log = logging.getLogger(__name__)


def run_tasks(delays: Sequence[float]) -> list[str]:
    """Run one task per delay at once; return their messages as they finish."""
    finished: queue.Queue[str] = queue.Queue()

    def task(number: int, delay: float) -> None:
        time.sleep(delay)
        finished.put(f"Task {number} completed")

    workers = [
        threading.Thread(target=task, args=(number, delay), daemon=True)
        for number, delay in enumerate(delays, start=1)
    ]
    for worker in workers:
        worker.start()
    received = [finished.get() for _ in workers]
    for worker in workers:
        worker.join()
    return received


def listen_for_log(
    messages: Iterable[str], logger: logging.Logger | None = None
) -> int:
    """Log every message as it arrives; return how many were logged."""
    logger = logger or log
    count = 0
    for message in messages:
        logger.info("%s", message.rstrip("\r\n"))
        count += 1
    return count


def roll_until_small(
    rng: random.Random | None = None, limit: int = 100
) -> list[int]:
    """Roll numbers from 1 to 1000 until one is no more than the limit.

    Returns every roll made; the last is the first at or below the limit.
    """
    rng = rng or random.Random()
    rolls = []
    current = 1000
    while current > limit:
        current = rng.randrange(1000) + 1
        rolls.append(current)
    return rolls


def _select_demo() -> None:
    for message in run_tasks((1, 2)):
        print("received", message, file=sys.stderr)
    print("All tasks completed", file=sys.stderr)


def _loop_demo() -> None:
    for i in range(11):
        print(i)
    rolls = roll_until_small()
    for roll in rolls:
        print(roll)
    print("Got", rolls[-1], "Loop finished")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    channel: queue.Queue[str | None] = queue.Queue()
    listener = threading.Thread(
        target=listen_for_log, args=(iter(channel.get, None),), daemon=True
    )
    listener.start()
    print("Enter a message:")
    try:
        for _ in range(5):
            print("->", flush=True)
            channel.put(sys.stdin.readline())
            time.sleep(1)
    finally:
        channel.put(None)
        listener.join()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Concurrency demos.")
    parser.add_argument("demo", nargs="?", choices=("loop", "select"), default="loop")
    args = parser.parse_args(argv)
    if args.demo == "select":
        _select_demo()
    else:
        _loop_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())