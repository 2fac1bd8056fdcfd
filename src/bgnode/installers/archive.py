"""Installer for Windows hosts, which have no package manager."""

import logging
import os
import posixpath
from pathlib import Path

from bgnode.errors import InstallationError
from bgnode.installers.base import PlatformInstaller, remove_path
from bgnode.installers.download import extract_archive, fetch
from bgnode.models import InstallTarget

log = logging.getLogger(__name__)

STAGING_DIR_NAME = ".extract"


class ReleaseArchiveInstaller(PlatformInstaller):
    """Install clients from pinned release archives into per-client directories."""

    prerequisites = (("git", "https://git-scm.com/downloads"),)

    def install(self, target: InstallTarget) -> None:
        if target.is_archive:
            self._install_archive(target)
        elif target.download_url:
            self._install_script(target)
        self._run_commands(target.post_install_commands)

    def _install_archive(self, target: InstallTarget) -> None:
        """Download, extract, and move the binary to its canonical path.

        The canonical path is only written by the final move, so a failure at
        any earlier step leaves the client reported as absent.
        """
        client_dir = self._client_dir(target)
        archive = client_dir / posixpath.basename(target.download_url)
        staging = client_dir / STAGING_DIR_NAME
        remove_path(staging)

        fetch(target.download_url, archive, self.config.install_timeout)
        extract_archive(archive, staging)

        binary = staging.joinpath(*target.archive_member.split("/"))
        if not binary.is_file():
            raise InstallationError(
                f"{archive.name} does not contain {target.archive_member}"
            )
        try:
            os.replace(binary, Path(target.expected_path))
            remove_path(archive)
            remove_path(staging)
        except OSError as e:
            raise InstallationError(f"Unable to install {target.name}: {e}") from e
        log.debug("installed %s at %s", target.name, target.expected_path)
