"""Fail when pyproject.toml and bgnode.__version__ disagree."""

from __future__ import annotations

import sys
from pathlib import Path

import tomllib

import bgnode

ROOT = Path(__file__).resolve().parent.parent


def project_version(path: Path = ROOT / "pyproject.toml") -> str:
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    version = data.get("project", {}).get("version")
    if not isinstance(version, str) or not version:
        raise SystemExit(f"Could not find project.version in {path.name}")
    return version


def main() -> int:
    expected = project_version()
    if expected != bgnode.__version__:
        print(
            f"Version mismatch: pyproject.toml project.version={expected} "
            f"!= bgnode.__version__={bgnode.__version__}",
            file=sys.stderr,
        )
        return 1
    print(f"Version check passed: {expected}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
