"""Console status messages for the bootstrap phase."""

import os
import sys
from typing import TextIO

from bgnode.constants import CYAN, RED, RESET


def supports_color(stream: TextIO | None = None) -> bool:
    """Return whether ANSI color output should be used."""
    stream = stream if stream is not None else sys.stdout
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def colored(text: str, code: str, stream: TextIO | None = None) -> str:
    if supports_color(stream):
        return f"{code}{text}{RESET}"
    return text


def status(text: str) -> None:
    print(text)


def notice(text: str) -> None:
    print(colored(text, CYAN))


def error(text: str) -> None:
    print(colored(text, RED, sys.stderr), file=sys.stderr)
