"""Exception types raised by bgnode components.

Every fatal condition is raised where it is detected and caught once, in
``bgnode.cli.main``, which reports it and exits non-zero.
"""


class BgnodeError(Exception):
    """Base class for fatal bgnode errors."""


class ConfigurationError(BgnodeError):
    """Invalid client selection or environment setting."""


class SecretError(BgnodeError):
    """The shared JWT secret could not be provisioned."""


class MissingPrerequisiteError(BgnodeError):
    """A tool required to probe or install clients is not available."""


class InstallationError(BgnodeError):
    """Downloading, extracting or package-manager installation failed."""


class SpawnError(BgnodeError):
    """A client process could not be started."""
