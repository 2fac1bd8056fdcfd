"""Per-platform client installers."""

import sys

from bgnode.installers.archive import ReleaseArchiveInstaller
from bgnode.installers.base import PlatformInstaller
from bgnode.installers.homebrew import HomebrewInstaller
from bgnode.installers.targets import POSIX, executable_path, platform_family, resolve_target
from bgnode.models import NodeConfig
from bgnode.runner import CommandRunner

__all__ = [
    "HomebrewInstaller",
    "PlatformInstaller",
    "ReleaseArchiveInstaller",
    "executable_path",
    "installer_for_platform",
    "resolve_target",
]


def installer_for_platform(
    config: NodeConfig,
    platform: str | None = None,
    runner: CommandRunner | None = None,
) -> PlatformInstaller:
    """Return the installer variant for ``platform`` (defaults to this host)."""
    platform = platform or sys.platform
    if platform_family(platform) == POSIX:
        return HomebrewInstaller(config, platform, runner)
    return ReleaseArchiveInstaller(config, platform, runner)
