"""Shared fixtures for bgnode tests."""

import pytest


class RecordingRunner:
    """Stand-in for CommandRunner that records calls instead of running them."""

    def __init__(self, tools=(), versions=None, failing_probes=()):
        self.tools = set(tools)
        self.versions = dict(versions or {})
        self.failing_probes = set(failing_probes)
        self.run_calls: list[list[str]] = []
        self.output_calls: list[list[str]] = []
        self.timeout = 600

    def which(self, name):
        if name in self.tools or name in self.versions:
            return f"/usr/local/bin/{name}"
        return None

    def output(self, argv, timeout=None):
        self.output_calls.append(list(argv))
        name = argv[0]
        if name in self.failing_probes:
            return None
        if name in self.versions:
            return self.versions[name]
        if name in self.tools:
            return f"{name} 1.0.0"
        return None

    def run(self, argv):
        self.run_calls.append(list(argv))


@pytest.fixture
def recording_runner():
    return RecordingRunner
