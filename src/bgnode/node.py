"""Core session logic: prepare the host, then supervise both clients."""

import asyncio
import logging
import signal
import sys
from contextlib import suppress

from bgnode.channel import LogChannel
from bgnode.clients import build_launch_spec
from bgnode.display import Dashboard
from bgnode.installers import PlatformInstaller, installer_for_platform
from bgnode.keys import TerminalKeys
from bgnode.models import LaunchSpec, NodeConfig
from bgnode.secret import ensure_secret
from bgnode.supervisor import Supervisor

log = logging.getLogger("bgnode")


def prepare(
    config: NodeConfig,
    platform: str | None = None,
    installer: PlatformInstaller | None = None,
) -> list[LaunchSpec]:
    """Provision the secret, install missing clients, and build both launch specs.

    Runs synchronously; any failure raises and nothing is launched.
    """
    platform = platform or sys.platform
    secret_path = ensure_secret(config.jwt_dir)
    installer = installer or installer_for_platform(config, platform)
    installer.check_prerequisites()

    selections = (config.execution, config.consensus)
    for selection in selections:
        installer.ensure_installed(selection)

    specs = [build_launch_spec(s, secret_path, config, platform) for s in selections]
    for spec in specs:
        log.debug("launch %s: %s", spec.role.value, spec.command)
    return specs


async def serve(
    specs: list[LaunchSpec],
    config: NodeConfig,
    dashboard: Dashboard | None = None,
    keys: TerminalKeys | None = None,
) -> int:
    """Run both clients under the live display until the user quits."""
    loop = asyncio.get_running_loop()
    channels = {spec.role: LogChannel(spec.role) for spec in specs}
    dashboard = dashboard or Dashboard.for_specs(specs, config.pane_max_lines)
    keys = keys or TerminalKeys()
    supervisor = Supervisor(specs, channels, config.shutdown_timeout)

    await supervisor.start_all()
    try:
        for signum in (signal.SIGINT, signal.SIGTERM):
            # Not available on Windows event loops.
            with suppress(NotImplementedError, RuntimeError):
                loop.add_signal_handler(signum, dashboard.request_exit)
        with keys.attached(loop, dashboard.handle_key):
            await dashboard.run(channels)
    finally:
        await supervisor.stop_all()
        for signum in (signal.SIGINT, signal.SIGTERM):
            with suppress(NotImplementedError, RuntimeError):
                loop.remove_signal_handler(signum)
    return 0


def run_node(config: NodeConfig, platform: str | None = None) -> int:
    specs = prepare(config, platform)
    return asyncio.run(serve(specs, config))
