"""Spawn, watch and stop the two client processes."""

import asyncio
import logging
import os
import signal
from enum import Enum

from bgnode.channel import LogChannel, OutputLine, ProcessExited
from bgnode.errors import SpawnError
from bgnode.models import LaunchSpec, Role

log = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class ProcessState(Enum):
    NOT_STARTED = "not started"
    RUNNING = "running"
    EXITED = "exited"


class SupervisedProcess:
    """One client process and the tasks forwarding its output to a channel."""

    def __init__(self, spec: LaunchSpec, channel: LogChannel) -> None:
        self.spec = spec
        self.channel = channel
        self.state = ProcessState.NOT_STARTED
        self.exit_code: int | None = None
        self._process: asyncio.subprocess.Process | None = None
        self._monitor: asyncio.Task | None = None

    @property
    def role(self) -> Role:
        return self.spec.role

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process is not None else None

    async def start(self) -> None:
        if self.state is not ProcessState.NOT_STARTED:
            raise RuntimeError(f"{self.spec.name} was already started")
        try:
            self._process = await asyncio.create_subprocess_exec(
                *self.spec.command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=os.name != "nt",
            )
        except OSError as e:
            raise SpawnError(
                f"Unable to start {self.spec.name} ({self.spec.executable}): {e}"
            ) from e
        self.state = ProcessState.RUNNING
        log.debug("started %s pid=%d: %s", self.spec.name, self.pid, self.spec.command)
        self._monitor = asyncio.create_task(self._watch(), name=f"bgnode-{self.role.value}")

    async def wait(self) -> int:
        """Wait for the process to exit and return its exit code."""
        if self._monitor is None:
            raise RuntimeError(f"{self.spec.name} was never started")
        await asyncio.shield(self._monitor)
        return self.exit_code

    async def stop(self, timeout: float) -> None:
        """Terminate the process, escalating to a kill after ``timeout`` seconds."""
        if self.state is not ProcessState.RUNNING:
            return
        log.debug("terminating %s pid=%d", self.spec.name, self.pid)
        self._signal(signal.SIGTERM)
        try:
            await asyncio.wait_for(asyncio.shield(self._monitor), timeout)
            return
        except asyncio.TimeoutError:
            log.debug("%s ignored SIGTERM for %gs, killing", self.spec.name, timeout)
        self._signal(getattr(signal, "SIGKILL", signal.SIGTERM))
        try:
            await asyncio.wait_for(asyncio.shield(self._monitor), timeout)
        except asyncio.TimeoutError:
            # A grandchild may still hold the pipes open.
            self._monitor.cancel()
            self._finish(await self._process.wait())

    def _signal(self, signum: int) -> None:
        try:
            if os.name != "nt":
                os.killpg(self._process.pid, signum)
            elif signum == signal.SIGTERM:
                self._process.terminate()
            else:
                self._process.kill()
        except ProcessLookupError:
            pass

    async def _watch(self) -> None:
        await asyncio.gather(
            self._pump(self._process.stdout),
            self._pump(self._process.stderr),
        )
        self._finish(await self._process.wait())

    async def _pump(self, stream: asyncio.StreamReader) -> None:
        pending = b""
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            *lines, pending = (pending + chunk).split(b"\n")
            for line in lines:
                self._emit(line)
            # Output without newlines is flushed in bounded pieces.
            while len(pending) >= READ_CHUNK_SIZE:
                self._emit(pending[:READ_CHUNK_SIZE])
                pending = pending[READ_CHUNK_SIZE:]
        if pending:
            self._emit(pending)

    def _emit(self, raw: bytes) -> None:
        text = raw.decode(errors="replace").rstrip("\r")
        self.channel.send(OutputLine(self.role, text))

    def _finish(self, code: int) -> None:
        if self.state is ProcessState.EXITED:
            return
        self.exit_code = code
        self.state = ProcessState.EXITED
        log.debug("%s exited with code %d", self.spec.name, code)
        self.channel.send(ProcessExited(self.role, self.spec.name, code))


class Supervisor:
    """Start both clients together and stop them together."""

    def __init__(
        self,
        specs: list[LaunchSpec],
        channels: dict[Role, LogChannel],
        shutdown_timeout: float,
    ) -> None:
        self.processes = [SupervisedProcess(spec, channels[spec.role]) for spec in specs]
        self.shutdown_timeout = shutdown_timeout

    async def start_all(self) -> None:
        """Start every process in order; if one fails, stop those already running."""
        started: list[SupervisedProcess] = []
        for process in self.processes:
            try:
                await process.start()
            except SpawnError:
                for running in started:
                    await running.stop(self.shutdown_timeout)
                raise
            started.append(process)

    async def stop_all(self) -> None:
        await asyncio.gather(*(p.stop(self.shutdown_timeout) for p in self.processes))
