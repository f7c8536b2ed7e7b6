"""Single-key terminal input, screen clearing and a key echo demo."""

from __future__ import annotations

import os
import queue
import subprocess
import sys
import threading
from typing import Callable, TextIO

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


def read_key() -> str:
    """Read one key press from standard input without waiting for Enter.

    Returns an empty string once input is exhausted.
    """
    stream = sys.stdin
    if not stream.isatty():
        return stream.read(1)
    if msvcrt is not None:
        key = msvcrt.getwch()
    else:
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = os.read(fd, 1).decode("utf-8", errors="replace")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if key == "\x03":
        raise KeyboardInterrupt
    return key


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    subprocess.run(command, stdout=sys.stdout, check=False)


def echo_keys(read_key: Callable[[], str], out: TextIO) -> list[str]:
    """Echo key presses through a listener thread until 'q' or 'Q' is pressed.

    Returns the keys that were echoed, in order.
    """
    print("Press any key, or q to exit...", file=out, flush=True)
    pressed: queue.Queue[str | None] = queue.Queue()
    echoed: list[str] = []

    def listen() -> None:
        while (key := pressed.get()) is not None:
            print(f"Key pressed: {key}", file=out, flush=True)
            echoed.append(key)

    listener = threading.Thread(target=listen, daemon=True)
    listener.start()
    try:
        while True:
            key = read_key()
            if key in ("", "q", "Q"):
                break
            pressed.put(key)
    finally:
        pressed.put(None)
        listener.join()
    return echoed


def main(argv: list[str] | None = None) -> int:
    echo_keys(read_key, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())