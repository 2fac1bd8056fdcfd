"""Unit tests for bgnode.keys."""

import asyncio
import io
import os

import pytest

from bgnode.keys import TerminalKeys, is_exit_key


class TestIsExitKey:
    @pytest.mark.parametrize("data", [b"\x1b", b"q", b"\x03", b"xq"])
    def test_exit_keys(self, data):
        assert is_exit_key(data) is True

    @pytest.mark.parametrize("data", [b"a", b"Q", b"\x1b[A", b"\x1bOP", b""])
    def test_non_exit_keys(self, data):
        assert is_exit_key(data) is False


class TestTerminalKeys:
    def test_non_tty_stream_is_left_alone(self):
        received = []

        async def scenario():
            loop = asyncio.get_running_loop()
            with TerminalKeys(io.StringIO()).attached(loop, received.append):
                await asyncio.sleep(0)

        asyncio.run(scenario())
        assert received == []

    @pytest.mark.skipif(os.name == "nt", reason="POSIX terminals")
    def test_keys_are_delivered_and_terminal_mode_restored(self):
        import termios

        master_fd, slave_fd = os.openpty()
        stream = os.fdopen(slave_fd, "r")
        before = termios.tcgetattr(slave_fd)
        received = []

        async def scenario():
            loop = asyncio.get_running_loop()
            got_key = asyncio.Event()

            def on_key(data):
                received.append(data)
                got_key.set()

            with TerminalKeys(stream).attached(loop, on_key):
                lflag = termios.tcgetattr(slave_fd)[3]
                assert not lflag & termios.ICANON
                assert not lflag & termios.ECHO
                assert not lflag & termios.ISIG
                os.write(master_fd, b"q")
                await asyncio.wait_for(got_key.wait(), 5)

        try:
            asyncio.run(scenario())
            assert received == [b"q"]
            assert termios.tcgetattr(slave_fd) == before
        finally:
            stream.close()
            os.close(master_fd)
