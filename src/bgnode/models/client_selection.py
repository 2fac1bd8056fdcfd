"""Client role and selection models."""

from dataclasses import dataclass
from enum import Enum

from bgnode.constants import CONSENSUS_CLIENTS, EXECUTION_CLIENTS
from bgnode.errors import ConfigurationError


class Role(str, Enum):
    EXECUTION = "execution"
    CONSENSUS = "consensus"

    @property
    def valid_names(self) -> tuple[str, ...]:
        if self is Role.EXECUTION:
            return EXECUTION_CLIENTS
        return CONSENSUS_CLIENTS


@dataclass(frozen=True)
class ClientSelection:
    """A validated (role, client name) pair."""

    role: Role
    name: str

    def __post_init__(self) -> None:
        if self.name not in self.role.valid_names:
            choices = " or ".join(f"'{n}'" for n in self.role.valid_names)
            raise ConfigurationError(
                f"Unknown {self.role.value} client '{self.name}'. Use {choices}."
            )

    @property
    def display_name(self) -> str:
        return self.name.capitalize()
