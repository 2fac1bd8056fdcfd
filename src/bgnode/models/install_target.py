"""Installation contract for one (client, platform) combination."""

from dataclasses import dataclass

from bgnode.models.client_selection import Role


@dataclass(frozen=True)
class InstallTarget:
    """Where a client should live on a platform and how to put it there.

    ``expected_path`` is either a bare command name resolved through PATH or
    an absolute file path. Archive targets set ``archive_member`` to the path
    of the binary inside the extracted archive.
    """

    role: Role
    name: str
    platform: str
    expected_path: str
    version_probe: tuple[str, ...] | None = None
    install_commands: tuple[tuple[str, ...], ...] = ()
    download_url: str | None = None
    archive_member: str | None = None
    post_install_commands: tuple[tuple[str, ...], ...] = ()
    make_executable: bool = False

    @property
    def is_archive(self) -> bool:
        return self.archive_member is not None
