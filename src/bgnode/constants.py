"""Shared constants for bgnode."""

RED = "\033[31m"
CYAN = "\033[36m"
RESET = "\033[0m"

EXECUTION_CLIENTS = ("geth", "reth")
CONSENSUS_CLIENTS = ("prysm", "lighthouse")
DEFAULT_EXECUTION_CLIENT = "geth"
DEFAULT_CONSENSUS_CLIENT = "prysm"

AUTH_RPC_HOST = "127.0.0.1"
AUTH_RPC_PORT = 8551
EXECUTION_ENDPOINT = f"http://localhost:{AUTH_RPC_PORT}"
CHECKPOINT_SYNC_URL = "https://mainnet.checkpoint.sigp.io"

JWT_DIR_NAME = "jwt"
JWT_FILE_NAME = "jwt.hex"
JWT_SECRET_BYTES = 32

DEFAULT_INSTALL_TIMEOUT_SECONDS = 600.0
DEFAULT_SHUTDOWN_TIMEOUT_SECONDS = 10.0
DEFAULT_PANE_MAX_LINES = 1000
PROBE_TIMEOUT_SECONDS = 15
