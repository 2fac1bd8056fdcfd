"""Configuration model for bgnode."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from bgnode.constants import (
    DEFAULT_CONSENSUS_CLIENT,
    DEFAULT_EXECUTION_CLIENT,
    DEFAULT_INSTALL_TIMEOUT_SECONDS,
    DEFAULT_PANE_MAX_LINES,
    DEFAULT_SHUTDOWN_TIMEOUT_SECONDS,
    JWT_DIR_NAME,
)
from bgnode.models.client_selection import ClientSelection, Role

DEFAULT_HOME = Path.home() / "bgnode"


class NodeConfig(BaseModel):
    """Runtime configuration for one bgnode session. Built once, never mutated."""

    model_config = ConfigDict(frozen=True)

    execution_client: Literal["geth", "reth"] = DEFAULT_EXECUTION_CLIENT
    consensus_client: Literal["prysm", "lighthouse"] = DEFAULT_CONSENSUS_CLIENT
    home: Path = DEFAULT_HOME
    install_timeout: float = Field(default=DEFAULT_INSTALL_TIMEOUT_SECONDS, gt=0)
    shutdown_timeout: float = Field(default=DEFAULT_SHUTDOWN_TIMEOUT_SECONDS, gt=0)
    pane_max_lines: int = Field(default=DEFAULT_PANE_MAX_LINES, ge=10)

    @property
    def execution(self) -> ClientSelection:
        return ClientSelection(Role.EXECUTION, self.execution_client)

    @property
    def consensus(self) -> ClientSelection:
        return ClientSelection(Role.CONSENSUS, self.consensus_client)

    @property
    def jwt_dir(self) -> Path:
        return self.home / JWT_DIR_NAME

    def client_dir(self, name: str) -> Path:
        return self.home / name
