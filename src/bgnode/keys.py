"""Global exit keys read from the controlling terminal."""

import asyncio
import logging
import os
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

if os.name == "nt":
    import msvcrt
else:
    import termios

log = logging.getLogger(__name__)

ESCAPE = b"\x1b"
QUIT = b"q"
INTERRUPT = b"\x03"
WINDOWS_POLL_SECONDS = 0.05

KeyCallback = Callable[[bytes], None]


def is_exit_key(data: bytes) -> bool:
    """Return whether a read from the terminal contains Escape, q or Ctrl-C.

    A lone ESC byte is the Escape key; ESC followed by more bytes is an arrow
    or function key sequence and does not count.
    """
    if data == ESCAPE:
        return True
    if data.startswith(ESCAPE):
        return False
    return QUIT in data or INTERRUPT in data


class TerminalKeys:
    """Deliver raw key presses to a callback running on the event loop."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    @contextmanager
    def attached(self, loop: asyncio.AbstractEventLoop, on_key: KeyCallback) -> Iterator[None]:
        if not (hasattr(self._stream, "isatty") and self._stream.isatty()):
            log.debug("stdin is not a terminal, exit keys disabled")
            yield
            return
        if os.name == "nt":
            with self._polled(loop, on_key):
                yield
            return

        fd = self._stream.fileno()
        old_attrs = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        # No echo, no line buffering, and Ctrl-C arrives as a byte instead of SIGINT.
        mode[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
        mode[6][termios.VMIN] = 1
        mode[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, mode)
        loop.add_reader(fd, self._read, fd, on_key)
        try:
            yield
        finally:
            loop.remove_reader(fd)
            termios.tcsetattr(fd, termios.TCSAFLUSH, old_attrs)

    @staticmethod
    def _read(fd: int, on_key: KeyCallback) -> None:
        try:
            data = os.read(fd, 32)
        except OSError:
            return
        if data:
            on_key(data)

    @contextmanager
    def _polled(self, loop: asyncio.AbstractEventLoop, on_key: KeyCallback) -> Iterator[None]:
        async def poll() -> None:
            while True:
                while msvcrt.kbhit():
                    on_key(msvcrt.getch())
                await asyncio.sleep(WINDOWS_POLL_SECONDS)

        task = loop.create_task(poll())
        try:
            yield
        finally:
            task.cancel()
