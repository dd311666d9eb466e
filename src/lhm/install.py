"""Installation: hook symlinks, default global config, git core.hooksPath."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from lhm.core.config import DEFAULT_GLOBAL_CONFIG, Config, find_config
from lhm.core.errors import LhmError
from lhm.hooks.models import GIT_HOOKS

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL_CONFIG_NAME = ".lefthook.yaml"


def create_hook_symlinks(hooks_dir: Path, binary: Path) -> None:
    """Point ``hooks_dir/<hook>`` at *binary* for every git hook, replacing what was there."""
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LhmError(f"failed to create {hooks_dir}: {e}") from e

    for hook in GIT_HOOKS:
        link = hooks_dir / hook
        try:
            link.unlink(missing_ok=True)
            link.symlink_to(binary)
        except OSError as e:
            raise LhmError(f"failed to symlink {link}: {e}") from e


def install_default_global_config(home: Path) -> Path | None:
    """Write the built-in global config unless one already exists. Returns the new file."""
    if find_config(home) is not None:
        logger.debug("global config already exists, skipping default")
        return None
    path = home / DEFAULT_GLOBAL_CONFIG_NAME
    try:
        path.write_text(DEFAULT_GLOBAL_CONFIG, encoding="utf-8")
    except OSError as e:
        raise LhmError(f"failed to write {path}: {e}") from e
    logger.info("created default global config at %s", path)
    return path


def set_hooks_path(hooks_dir: Path) -> None:
    try:
        result = subprocess.run(["git", "config", "--global", "core.hooksPath", str(hooks_dir)])
    except OSError as e:
        raise LhmError(f"failed to set core.hooksPath: {e}") from e
    if result.returncode != 0:
        raise LhmError("failed to set core.hooksPath")


def install(config: Config, binary: Path, default_config: bool = False) -> None:
    hooks_dir = config.hooks_dir
    logger.debug("hooks dir: %s", hooks_dir)
    logger.debug("binary path: %s", binary)

    if default_config:
        install_default_global_config(config.home)
    create_hook_symlinks(hooks_dir, binary)
    set_hooks_path(hooks_dir)
    logger.info("installed hooks to %s", hooks_dir)
    logger.info("set core.hooksPath = %s", hooks_dir)
