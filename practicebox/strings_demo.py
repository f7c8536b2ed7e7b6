"""Looking at strings as bytes and using common string operations."""

from __future__ import annotations

import sys


def hex_bytes(text: str) -> str:
    """Return the UTF-8 bytes of the text in hex, unpadded, separated by spaces."""
    return " ".join(f"{byte:x}" for byte in text.encode("utf-8"))


def compare(a: str, b: str) -> int:
    """Return -1, 0 or 1 as a sorts before, equal to or after b."""
    return (a > b) - (a < b)


def main(argv: list[str] | None = None) -> int:
    name = "John Doe"
    print(hex_bytes(name) + " ")

    builder = ["Hello, ", "World!"]
    print("".join(builder), file=sys.stderr)
    print(name[0:4], file=sys.stderr)
    print(name[5:8], file=sys.stderr)

    words = ["Hello", "World", "Code", "is", "awesome"]
    print(words[1], file=sys.stderr)
    print(words[2], file=sys.stderr)

    email = "user@example.com"
    url = "https://example.com"
    filename = "document.pdf"
    print(f"Does email start with 'user'? {str(email.startswith('user')).lower()}")
    print(f"Does URL start with 'https'? {str(url.startswith('https')).lower()}")
    print(f"Does URL start with 'http'? {str(url.startswith('http')).lower()}")
    print(f"Does filename end with '.pdf'? {str(filename.endswith('.pdf')).lower()}")
    print(f"Does email start with ''? {str(email.startswith('')).lower()}")

    print(str("example" in email).lower())
    print(email.count("@"))
    print(email.find("@"))
    print(email.rfind("m"))

    text = "Code is good. Code is fast. Code is productive."
    print("\n=== Replace all example ===")
    print("Replaced everywhere:", text.replace("Code", "Clean code"))

    print(compare("abc", "abc"))
    print(compare("abc", "ab"))
    print("c < d" if "abc" < "abd" else "c >= d")

    print("hello".upper())
    print("HELLO".lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())