"""External command execution for probes and installers."""

import logging
import shutil
import subprocess

from bgnode.errors import InstallationError

log = logging.getLogger(__name__)


class CommandRunner:
    """Run package-manager and helper commands under a timeout.

    Installers receive a runner instead of calling ``subprocess`` directly so
    tests can substitute a recording fake.
    """

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def output(self, argv: list[str], timeout: float | None = None) -> str | None:
        """Return the stripped output of ``argv``, or None if it did not succeed."""
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=timeout or self.timeout,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            log.debug("%s failed: %s", " ".join(argv), e)
            return None
        if result.returncode != 0:
            log.debug("%s returned %d", " ".join(argv), result.returncode)
            return None
        output = result.stdout or result.stderr
        return output.strip() if output else ""

    def run(self, argv: list[str]) -> None:
        """Run ``argv`` with inherited stdio, raising InstallationError on failure."""
        log.debug("running %s", " ".join(argv))
        try:
            subprocess.run(argv, check=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise InstallationError(
                f"'{' '.join(argv)}' did not finish within {self.timeout:g} seconds"
            ) from e
        except subprocess.CalledProcessError as e:
            raise InstallationError(
                f"'{' '.join(argv)}' failed with exit code {e.returncode}"
            ) from e
        except OSError as e:
            raise InstallationError(f"Unable to run '{argv[0]}': {e}") from e
