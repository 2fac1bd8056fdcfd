"""Installer for macOS and Linux hosts backed by Homebrew."""

from bgnode.installers.base import PlatformInstaller
from bgnode.models import InstallTarget


class HomebrewInstaller(PlatformInstaller):
    """Install clients with ``brew``; Prysm comes as a downloaded launcher script."""

    prerequisites = (("brew", "https://brew.sh/"),)

    def install(self, target: InstallTarget) -> None:
        if target.install_commands:
            self._run_commands(target.install_commands)
        elif target.download_url:
            self._install_script(target)
        self._run_commands(target.post_install_commands)
