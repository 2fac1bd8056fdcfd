"""Static installation tables keyed by platform family and client name."""

from bgnode.errors import MissingPrerequisiteError
from bgnode.models import ClientSelection, InstallTarget, NodeConfig

POSIX = "posix"
WINDOWS = "windows"

_PLATFORM_FAMILIES = {
    "darwin": POSIX,
    "linux": POSIX,
    "win32": WINDOWS,
}

PRYSM_SCRIPT_BASE_URL = "https://raw.githubusercontent.com/prysmaticlabs/prysm/master"
GETH_WINDOWS_BUILD = "geth-windows-amd64-1.14.0-87246f3c"
GETH_WINDOWS_URL = f"https://gethstore.blob.core.windows.net/builds/{GETH_WINDOWS_BUILD}.zip"
RETH_VERSION = "v0.2.0-beta.6"
RETH_WINDOWS_URL = (
    "https://github.com/paradigmxyz/reth/releases/download/"
    f"{RETH_VERSION}/reth-{RETH_VERSION}-x86_64-pc-windows-gnu.tar.gz"
)
LIGHTHOUSE_VERSION = "v5.1.3"
LIGHTHOUSE_WINDOWS_URL = (
    "https://github.com/sigp/lighthouse/releases/download/"
    f"{LIGHTHOUSE_VERSION}/lighthouse-{LIGHTHOUSE_VERSION}-x86_64-windows.tar.gz"
)

# Package-manager commands, run in order, for clients Homebrew can provide.
BREW_INSTALL_COMMANDS: dict[str, tuple[tuple[str, ...], ...]] = {
    "geth": (
        ("brew", "tap", "ethereum/ethereum"),
        ("brew", "install", "ethereum"),
    ),
    "reth": (("brew", "install", "paradigmxyz/brew/reth"),),
    "lighthouse": (("brew", "install", "lighthouse"),),
}

# Release archive URL and the path of the binary inside the extracted archive.
WINDOWS_ARCHIVES: dict[str, tuple[str, str]] = {
    "geth": (GETH_WINDOWS_URL, f"{GETH_WINDOWS_BUILD}/geth.exe"),
    "reth": (RETH_WINDOWS_URL, "reth.exe"),
    "lighthouse": (LIGHTHOUSE_WINDOWS_URL, "lighthouse.exe"),
}

ENABLE_VIRTUAL_TERMINAL = (
    "reg", "add", "HKCU\\Console", "/v", "VirtualTerminalLevel",
    "/t", "REG_DWORD", "/d", "1",
)


def platform_family(platform: str) -> str:
    try:
        return _PLATFORM_FAMILIES[platform]
    except KeyError:
        raise MissingPrerequisiteError(
            f"Unsupported platform '{platform}'. bgnode runs on macOS, Linux and Windows."
        ) from None


def executable_path(name: str, platform: str, config: NodeConfig) -> str:
    """Return the canonical location of a client's executable on ``platform``.

    On POSIX, Homebrew-managed clients are bare names resolved through PATH.
    """
    client_dir = config.client_dir(name)
    if platform_family(platform) == WINDOWS:
        if name == "prysm":
            return str(client_dir / "prysm.bat")
        return str(client_dir / f"{name}.exe")
    if name == "prysm":
        return str(client_dir / "prysm.sh")
    return name


def resolve_target(selection: ClientSelection, platform: str, config: NodeConfig) -> InstallTarget:
    name = selection.name
    family = platform_family(platform)
    expected_path = executable_path(name, platform, config)

    if name == "prysm":
        script = "prysm.bat" if family == WINDOWS else "prysm.sh"
        return InstallTarget(
            role=selection.role,
            name=name,
            platform=platform,
            expected_path=expected_path,
            download_url=f"{PRYSM_SCRIPT_BASE_URL}/{script}",
            post_install_commands=(ENABLE_VIRTUAL_TERMINAL,) if family == WINDOWS else (),
            make_executable=family == POSIX,
        )

    if family == WINDOWS:
        url, member = WINDOWS_ARCHIVES[name]
        return InstallTarget(
            role=selection.role,
            name=name,
            platform=platform,
            expected_path=expected_path,
            download_url=url,
            archive_member=member,
        )

    return InstallTarget(
        role=selection.role,
        name=name,
        platform=platform,
        expected_path=expected_path,
        version_probe=(expected_path, "--version"),
        install_commands=BREW_INSTALL_COMMANDS[name],
    )
