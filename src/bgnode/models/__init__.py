"""Model package for bgnode."""

from bgnode.models.client_selection import ClientSelection, Role
from bgnode.models.install_target import InstallTarget
from bgnode.models.launch_spec import LaunchSpec
from bgnode.models.node_config import DEFAULT_HOME, NodeConfig

__all__ = [
    "ClientSelection",
    "DEFAULT_HOME",
    "InstallTarget",
    "LaunchSpec",
    "NodeConfig",
    "Role",
]
