"""Unit tests for bgnode.display."""

import asyncio
import io

import pytest
from rich.console import Console

from bgnode.channel import LogChannel, OutputLine, ProcessExited
from bgnode.display import Dashboard, LogPane
from bgnode.models import LaunchSpec, Role


def make_console(height: int = 24) -> Console:
    return Console(file=io.StringIO(), width=80, height=height, color_system=None)


def make_dashboard(max_lines: int = 100) -> Dashboard:
    specs = [
        LaunchSpec(Role.EXECUTION, "geth", "geth", ()),
        LaunchSpec(Role.CONSENSUS, "prysm", "prysm.sh", ()),
    ]
    return Dashboard.for_specs(specs, max_lines, console=make_console(), screen=False)


def rendered_text(renderable) -> str:
    console = make_console()
    console.print(renderable)
    return console.file.getvalue()


class TestLogPane:
    def test_retained_lines_are_capped(self):
        pane = LogPane(Role.EXECUTION, "Geth Logs", max_lines=10)
        for i in range(25):
            pane.append(f"line {i}")

        assert len(pane.lines) == 10
        assert pane.lines[0] == "line 15"
        assert pane.lines[-1] == "line 24"

    def test_render_shows_most_recent_lines_only(self):
        pane = LogPane(Role.EXECUTION, "Geth Logs", max_lines=100)
        for i in range(10):
            pane.append(f"line {i}")

        text = rendered_text(pane.render(height=3))

        assert "Geth Logs" in text
        assert "line 9" in text
        assert "line 7" in text
        assert "line 6" not in text

    def test_ansi_colors_from_clients_are_not_printed_raw(self):
        pane = LogPane(Role.CONSENSUS, "Prysm Logs", max_lines=10)
        pane.append("\x1b[32mINFO\x1b[0m synced")

        text = rendered_text(pane.render(height=5))

        assert "INFO synced" in text
        assert "[32m" not in text


class TestKeys:
    @pytest.mark.parametrize("key", [b"\x1b", b"q", b"\x03"])
    def test_exit_keys_end_the_session(self, key):
        dashboard = make_dashboard()
        dashboard.handle_key(key)
        assert dashboard.exit_requested

    @pytest.mark.parametrize("key", [b"a", b"Q", b" ", b"\r", b"\x1b[A"])
    def test_other_keys_are_ignored(self, key):
        dashboard = make_dashboard()
        dashboard.handle_key(key)
        assert not dashboard.exit_requested


class TestDashboard:
    def test_panes_are_titled_after_clients(self):
        dashboard = make_dashboard()
        assert dashboard.panes[Role.EXECUTION].title == "Geth Logs"
        assert dashboard.panes[Role.CONSENSUS].title == "Prysm Logs"

    def test_apply_routes_messages_to_their_pane(self):
        dashboard = make_dashboard()
        dashboard.apply(OutputLine(Role.CONSENSUS, "beacon ready"))
        dashboard.apply(ProcessExited(Role.EXECUTION, "geth", 1))

        assert list(dashboard.panes[Role.CONSENSUS].lines) == ["beacon ready"]
        assert list(dashboard.panes[Role.EXECUTION].lines) == [
            "Geth process exited with code 1"
        ]

    def test_render_contains_both_panes(self):
        dashboard = make_dashboard()
        dashboard.apply(OutputLine(Role.EXECUTION, "imported block"))
        dashboard.apply(OutputLine(Role.CONSENSUS, "synced slot"))

        text = rendered_text(dashboard.render())

        assert "Geth Logs" in text
        assert "Prysm Logs" in text
        assert "imported block" in text
        assert "synced slot" in text

    def test_run_consumes_channels_until_exit_key(self):
        dashboard = make_dashboard()
        channels = {role: LogChannel(role) for role in Role}

        async def scenario():
            task = asyncio.create_task(dashboard.run(channels))
            for i in range(3):
                channels[Role.EXECUTION].send(OutputLine(Role.EXECUTION, f"exec {i}"))
            channels[Role.CONSENSUS].send(OutputLine(Role.CONSENSUS, "cons 0"))
            for _ in range(200):
                if len(dashboard.panes[Role.EXECUTION].lines) == 3 and dashboard.panes[Role.CONSENSUS].lines:
                    break
                await asyncio.sleep(0.01)
            dashboard.handle_key(b"q")
            await asyncio.wait_for(task, 5)

        asyncio.run(scenario())

        assert list(dashboard.panes[Role.EXECUTION].lines) == ["exec 0", "exec 1", "exec 2"]
        assert list(dashboard.panes[Role.CONSENSUS].lines) == ["cons 0"]
