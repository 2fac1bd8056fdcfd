"""Messages passed from supervised processes to the log display."""

import asyncio
from dataclasses import dataclass

from bgnode.models import Role


@dataclass(frozen=True)
class OutputLine:
    role: Role
    text: str


@dataclass(frozen=True)
class ProcessExited:
    role: Role
    name: str
    code: int

    @property
    def summary(self) -> str:
        return f"{self.name.capitalize()} process exited with code {self.code}"


Message = OutputLine | ProcessExited


class LogChannel:
    """Unbounded queue carrying one role's output and exit notice.

    ``send`` never blocks and never drops, so a slow display cannot stall
    the process feeding it.
    """

    def __init__(self, role: Role) -> None:
        self.role = role
        self._queue: asyncio.Queue[Message] = asyncio.Queue()

    def send(self, message: Message) -> None:
        self._queue.put_nowait(message)

    async def receive(self) -> Message:
        return await self._queue.get()

    def drain(self) -> list[Message]:
        """Return every message already queued without waiting."""
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except asyncio.QueueEmpty:
                return messages
