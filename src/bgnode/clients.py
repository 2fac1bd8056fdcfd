"""Launch descriptors for the supported clients."""

from pathlib import Path

from bgnode.constants import AUTH_RPC_HOST, AUTH_RPC_PORT, CHECKPOINT_SYNC_URL, EXECUTION_ENDPOINT
from bgnode.installers.targets import executable_path
from bgnode.models import ClientSelection, LaunchSpec, NodeConfig

# Argument templates in each client's expected order. "{jwt}" is replaced
# with the shared secret path.
ARGUMENT_TEMPLATES: dict[str, tuple[str, ...]] = {
    "geth": (
        "--mainnet",
        "--http",
        "--http.api",
        "eth,net,engine,admin",
        "--http.addr",
        "0.0.0.0",
        "--syncmode",
        "full",
        "--authrpc.jwtsecret",
        "{jwt}",
    ),
    "reth": (
        "node",
        "--full",
        "--http",
        "--authrpc.addr",
        AUTH_RPC_HOST,
        "--authrpc.port",
        str(AUTH_RPC_PORT),
        "--authrpc.jwtsecret",
        "{jwt}",
    ),
    "prysm": (
        "beacon-chain",
        "--execution-endpoint",
        EXECUTION_ENDPOINT,
        "--mainnet",
        "--jwt-secret",
        "{jwt}",
    ),
    "lighthouse": (
        "bn",
        "--network",
        "mainnet",
        "--execution-endpoint",
        EXECUTION_ENDPOINT,
        "--execution-jwt",
        "{jwt}",
        "--checkpoint-sync-url",
        CHECKPOINT_SYNC_URL,
        "--disable-deposit-contract-sync",
    ),
}


def build_launch_spec(
    selection: ClientSelection,
    secret_path: Path,
    config: NodeConfig,
    platform: str,
) -> LaunchSpec:
    """Map a client selection to its executable and argument list."""
    jwt = str(secret_path)
    argv = tuple(jwt if arg == "{jwt}" else arg for arg in ARGUMENT_TEMPLATES[selection.name])
    return LaunchSpec(
        role=selection.role,
        name=selection.name,
        executable=executable_path(selection.name, platform, config),
        argv=argv,
    )
