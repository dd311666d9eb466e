"""Process helpers: repo_root, invoked_name."""

from __future__ import annotations

import subprocess
from pathlib import Path


def repo_root(cwd: Path | None = None) -> Path | None:
    """Return the top-level directory of the enclosing git repo, or None."""
    try:
        r = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError:
        return None
    if r.returncode != 0:
        return None
    top = r.stdout.strip()
    return Path(top) if top else None


def invoked_name(argv0: str) -> str:
    """Basename of the program name (git calls hooks by their hook name)."""
    return Path(argv0).name if argv0 else ""
