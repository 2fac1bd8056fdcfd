"""Configuration loading for bgnode."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from bgnode.errors import ConfigurationError
from bgnode.models import DEFAULT_HOME, NodeConfig

log = logging.getLogger(__name__)

ENV_HOME = "BGNODE_HOME"
ENV_INSTALL_TIMEOUT = "BGNODE_INSTALL_TIMEOUT"
ENV_SHUTDOWN_TIMEOUT = "BGNODE_SHUTDOWN_TIMEOUT"
ENV_PANE_LINES = "BGNODE_PANE_LINES"

_ENV_FIELDS = {
    ENV_INSTALL_TIMEOUT: "install_timeout",
    ENV_SHUTDOWN_TIMEOUT: "shutdown_timeout",
    ENV_PANE_LINES: "pane_max_lines",
}


def _home_from_env(env: Mapping[str, str]) -> Path:
    raw = env.get(ENV_HOME, "").strip()
    if not raw:
        return DEFAULT_HOME
    return Path(raw).expanduser()


def load_config(
    execution_client: str,
    consensus_client: str,
    env: Mapping[str, str] | None = None,
) -> NodeConfig:
    """Build the immutable session configuration from CLI selections and env."""
    env = os.environ if env is None else env
    values: dict[str, object] = {
        "execution_client": execution_client,
        "consensus_client": consensus_client,
        "home": _home_from_env(env),
    }
    for key, field in _ENV_FIELDS.items():
        raw = env.get(key, "").strip()
        if raw:
            values[field] = raw

    try:
        config = NodeConfig(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration ({problems})") from e

    log.debug("config=%s", config)
    return config
