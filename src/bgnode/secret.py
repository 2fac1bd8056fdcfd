"""Shared JWT secret used by the execution and consensus clients."""

import logging
import os
import secrets
import time
from pathlib import Path

from bgnode.console import status
from bgnode.constants import JWT_FILE_NAME, JWT_SECRET_BYTES
from bgnode.errors import SecretError

log = logging.getLogger(__name__)


def _has_secret(path: Path) -> bool:
    try:
        return path.stat().st_size > 0
    except FileNotFoundError:
        return False


def _write_atomically(path: Path, content: str) -> None:
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.{time.time_ns()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except BaseException:
        temp_file.unlink(missing_ok=True)
        raise


def ensure_secret(directory: Path) -> Path:
    """Return the path of the hex secret in ``directory``, creating it if needed.

    An existing non-empty secret is reused untouched. A new one is 32 random
    bytes, hex encoded, and is never visible half written.
    """
    directory = Path(directory)
    path = directory / JWT_FILE_NAME
    try:
        if not directory.is_dir():
            status(f"Creating '{directory}'")
            directory.mkdir(parents=True, exist_ok=True)
        if _has_secret(path):
            log.debug("reusing secret at %s", path)
            return path
        _write_atomically(path, secrets.token_hex(JWT_SECRET_BYTES))
    except OSError as e:
        raise SecretError(f"Unable to create JWT secret in '{directory}': {e}") from e

    log.debug("wrote new secret to %s", path)
    return path
