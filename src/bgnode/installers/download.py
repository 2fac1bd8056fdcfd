"""Release downloads and archive extraction."""

import logging
import shutil
import tarfile
import zipfile
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from bgnode import __version__
from bgnode.errors import InstallationError

log = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def fetch(url: str, dest: Path, timeout: float) -> Path:
    """Download ``url`` to ``dest`` over HTTPS, replacing any previous file."""
    request = Request(url, headers={"User-Agent": f"bgnode/{__version__}"})
    log.debug("downloading %s -> %s", url, dest)
    try:
        with urlopen(request, timeout=timeout) as response, open(dest, "wb") as f:
            shutil.copyfileobj(response, f, CHUNK_SIZE)
    except (HTTPError, URLError, TimeoutError, OSError) as e:
        raise InstallationError(f"Download of {url} failed: {e}") from e
    return dest


def extract_archive(archive: Path, dest: Path) -> None:
    """Extract a ``.zip`` or ``.tar.gz`` release archive into ``dest``."""
    log.debug("extracting %s -> %s", archive, dest)
    try:
        if zipfile.is_zipfile(archive):
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(dest)
            return
        with tarfile.open(archive, "r:*") as tf:
            tf.extractall(dest, filter="data")
    except (zipfile.BadZipFile, tarfile.TarError, OSError) as e:
        raise InstallationError(f"Unable to extract {archive.name}: {e}") from e
