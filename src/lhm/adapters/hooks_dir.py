"""Adapter for plain hook-script directories (``.hooks/``, ``git-hooks/``, ``.git/hooks/``).

Every script named after the hook (``pre-commit``) or prefixed with it
(``pre-commit-checkstyle``) becomes a command. Symlinks are ignored in
``.git/hooks/`` so an lhm symlink installed there cannot call itself.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .base import Adapter

logger = logging.getLogger(__name__)

HOOKS_DIR_NAMES = (".hooks", "git-hooks", ".git/hooks")
GIT_INTERNAL_HOOKS_DIR = ".git/hooks"
TASK_NAME = "hooks-dir"


def find_hooks_dir(root: Path) -> str | None:
    """First conventional hooks directory that exists under *root*."""
    for name in HOOKS_DIR_NAMES:
        if (root / name).is_dir():
            return name
    return None


def matching_scripts(hooks_dir: Path, hook_name: str, skip_symlinks: bool = False) -> list[str]:
    """Sorted file names in *hooks_dir* equal to *hook_name* or starting with ``{hook_name}-``."""
    prefix = f"{hook_name}-"
    try:
        entries = list(hooks_dir.iterdir())
    except OSError as e:
        logger.debug("cannot list %s: %s", hooks_dir, e)
        return []
    names = []
    for entry in entries:
        if skip_symlinks and entry.is_symlink():
            continue
        if not entry.is_file():
            continue
        if entry.name == hook_name or entry.name.startswith(prefix):
            names.append(entry.name)
    return sorted(names)


def task_name_for(script: str, hook_name: str) -> str:
    if script == hook_name:
        return TASK_NAME
    return f"{TASK_NAME}-{script[len(hook_name) + 1:]}"


class HooksDirAdapter(Adapter):
    name = "hooks-dir"

    def detect(self, root: Path) -> bool:
        return find_hooks_dir(root) is not None

    def generate(self, root: Path, hook_name: str) -> dict | None:
        dir_name = find_hooks_dir(root)
        if dir_name is None:
            return None
        scripts = matching_scripts(
            root / dir_name, hook_name, skip_symlinks=dir_name == GIT_INTERNAL_HOOKS_DIR
        )
        if not scripts:
            return None
        commands = {
            task_name_for(script, hook_name): {"run": f"{dir_name}/{script}"} for script in scripts
        }
        return {"commands": commands}
