"""Split-screen live view of both clients' output."""

import asyncio
from collections import deque

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from bgnode.channel import LogChannel, Message, ProcessExited
from bgnode.keys import is_exit_key
from bgnode.models import LaunchSpec, Role

REFRESH_INTERVAL_SECONDS = 0.1
PANE_STYLES = {
    Role.EXECUTION: "green",
    Role.CONSENSUS: "yellow",
}


class LogPane:
    """The most recent output lines of one client, capped at ``max_lines``."""

    def __init__(self, role: Role, title: str, max_lines: int, style: str = "white") -> None:
        self.role = role
        self.title = title
        self.style = style
        self.lines: deque[str] = deque(maxlen=max_lines)

    def append(self, line: str) -> None:
        self.lines.append(line)

    def render(self, height: int) -> Panel:
        visible = list(self.lines)[-height:] if height > 0 else []
        body = Text.from_ansi("\n".join(visible), style=self.style, no_wrap=True)
        return Panel(body, title=self.title, title_align="left", border_style=self.style)


class Dashboard:
    """Render one pane per role until an exit key is pressed."""

    def __init__(
        self,
        panes: dict[Role, LogPane],
        console: Console | None = None,
        screen: bool = True,
    ) -> None:
        self.panes = panes
        self.console = console if console is not None else Console()
        self.screen = screen
        self._exit = asyncio.Event()
        self._dirty = True

    @classmethod
    def for_specs(cls, specs: list[LaunchSpec], max_lines: int, **kwargs) -> "Dashboard":
        panes = {
            spec.role: LogPane(
                spec.role,
                f"{spec.name.capitalize()} Logs",
                max_lines,
                PANE_STYLES[spec.role],
            )
            for spec in specs
        }
        return cls(panes, **kwargs)

    @property
    def exit_requested(self) -> bool:
        return self._exit.is_set()

    def request_exit(self) -> None:
        self._exit.set()

    def handle_key(self, data: bytes) -> None:
        if is_exit_key(data):
            self.request_exit()

    def apply(self, message: Message) -> None:
        pane = self.panes[message.role]
        if isinstance(message, ProcessExited):
            pane.append(message.summary)
        else:
            pane.append(message.text)
        self._dirty = True

    def render(self) -> Layout:
        layout = Layout()
        rows = [Layout(name=role.value) for role in self.panes]
        layout.split_column(*rows)
        # Each pane gets half the screen minus its top and bottom border.
        height = max(self.console.size.height // max(len(rows), 1) - 2, 1)
        for role, pane in self.panes.items():
            layout[role.value].update(pane.render(height))
        return layout

    async def run(self, channels: dict[Role, LogChannel]) -> None:
        """Consume both channels and repaint until ``request_exit`` is called."""
        with Live(
            self.render(),
            console=self.console,
            screen=self.screen,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        ) as live:
            tasks = [asyncio.create_task(self._consume(channel)) for channel in channels.values()]
            tasks.append(asyncio.create_task(self._repaint(live)))
            try:
                await self._exit.wait()
            finally:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)

    async def _consume(self, channel: LogChannel) -> None:
        while True:
            message = await channel.receive()
            self.apply(message)
            for queued in channel.drain():
                self.apply(queued)

    async def _repaint(self, live: Live) -> None:
        while True:
            if self._dirty:
                self._dirty = False
                live.update(self.render(), refresh=True)
            await asyncio.sleep(REFRESH_INTERVAL_SECONDS)
