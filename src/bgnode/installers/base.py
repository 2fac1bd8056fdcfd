"""Platform installer interface shared by every host platform."""

import logging
import os
import shutil
import stat
from pathlib import Path

from bgnode.console import notice, status
from bgnode.constants import PROBE_TIMEOUT_SECONDS
from bgnode.errors import InstallationError, MissingPrerequisiteError
from bgnode.installers.download import fetch
from bgnode.installers.targets import resolve_target
from bgnode.models import ClientSelection, InstallTarget, NodeConfig
from bgnode.runner import CommandRunner

log = logging.getLogger(__name__)


class PlatformInstaller:
    """Make sure the selected clients exist on one host platform.

    Subclasses list their required tools in ``prerequisites`` as
    ``(tool, where to get it)`` pairs and implement ``install``.
    """

    prerequisites: tuple[tuple[str, str], ...] = ()

    def __init__(self, config: NodeConfig, platform: str, runner: CommandRunner | None = None) -> None:
        self.config = config
        self.platform = platform
        self.runner = runner if runner is not None else CommandRunner(config.install_timeout)

    def check_prerequisites(self) -> None:
        """Fail before any install if a required tool is missing."""
        for tool, hint in self.prerequisites:
            if self.runner.which(tool) is None:
                raise MissingPrerequisiteError(f"Please install {tool} ({hint}).")
            version = self.runner.output([tool, "--version"], timeout=PROBE_TIMEOUT_SECONDS)
            notice(f"{tool} is already installed. Version:\n{version or 'unknown'}")

    def target_for(self, selection: ClientSelection) -> InstallTarget:
        return resolve_target(selection, self.platform, self.config)

    def probe(self, target: InstallTarget) -> str | None:
        """Return the installed version ("" when unknown), or None if absent."""
        if target.version_probe is None:
            path = Path(target.expected_path)
            if path.is_file() and path.stat().st_size > 0:
                return ""
            return None
        if self.runner.which(target.expected_path) is None:
            log.debug("%s not found on PATH", target.expected_path)
            return None
        return self.runner.output(list(target.version_probe), timeout=PROBE_TIMEOUT_SECONDS)

    def ensure_installed(self, selection: ClientSelection) -> None:
        target = self.target_for(selection)
        version = self.probe(target)
        if version is not None:
            if version:
                notice(f"{selection.display_name} is already installed. Version:\n{version}")
            else:
                notice(f"{selection.display_name} is already installed.")
            return

        status(f"Installing {selection.display_name}.")
        self.install(target)
        status(f"{selection.display_name} installed.")

    def install(self, target: InstallTarget) -> None:
        raise NotImplementedError

    def _client_dir(self, target: InstallTarget) -> Path:
        client_dir = self.config.client_dir(target.name)
        if not client_dir.is_dir():
            status(f"Creating '{client_dir}'")
            try:
                client_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise InstallationError(f"Unable to create '{client_dir}': {e}") from e
        return client_dir

    def _install_script(self, target: InstallTarget) -> None:
        """Download a launcher script straight to its canonical path."""
        self._client_dir(target)
        dest = Path(target.expected_path)
        partial = dest.with_name(dest.name + ".part")
        fetch(target.download_url, partial, self.config.install_timeout)
        try:
            if target.make_executable:
                mode = os.stat(partial).st_mode
                os.chmod(partial, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
            os.replace(partial, dest)
        except OSError as e:
            raise InstallationError(f"Unable to install {dest.name}: {e}") from e

    def _run_commands(self, commands: tuple[tuple[str, ...], ...]) -> None:
        for argv in commands:
            self.runner.run(list(argv))


def remove_path(path: Path) -> None:
    """Delete a file or directory tree if it exists."""
    if path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
