"""Configuration: env, paths, config discovery, built-in global defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .document import Document, load_document, read_document

logger = logging.getLogger(__name__)

CONFIG_BASENAME = "lefthook"

# Probed in this order; the first existing file wins.
CONFIG_EXTENSIONS = ("yaml", "yml", "json", "jsonc", "toml")

DEFAULT_GLOBAL_CONFIG = """\
# Global lefthook configuration
output:
  - success
  - failure
pre-push:
  parallel: true
  commands:
    test:
      run: just test
      skip:
        - run: lefthook --dry-run test
    lint:
      run: just lint
      skip:
        - run: lefthook --dry-run lint
prepare-commit-msg:
  commands:
    aittributor:
      run: aittributor {1}
      skip:
        - run: which aittributor > /dev/null
pre-commit:
  commands:
    fmt:
      stage_fixed: true
      run: just fmt
      skip:
        - run: lefthook --dry-run fmt
"""


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true")


@dataclass
class Config:
    home: Path = field(default_factory=Path.home)
    cwd: Path = field(default_factory=Path.cwd)
    debug: bool = False
    engine: str = "lefthook"
    config_env_var: str = "LEFTHOOK_CONFIG"

    @property
    def hooks_dir(self) -> Path:
        """Directory holding the per-hook symlinks git dispatches to."""
        return self.home / ".lhm" / "hooks"


def load_config(debug: bool = False) -> Config:
    """Load config with priority: CLI flags > env > .env > defaults."""
    load_dotenv()

    config = Config()
    config.debug = debug or _env_flag("LHM_DEBUG")
    if engine := os.getenv("LHM_ENGINE"):
        config.engine = engine
    return config


def find_config(
    directory: Path, base: str = CONFIG_BASENAME, check_dot_config: bool = False
) -> Path | None:
    """Return the first config file for *base* in *directory*, or None.

    Checks ``{base}.{ext}``, ``.{base}.{ext}`` and, with *check_dot_config*,
    ``.config/{base}.{ext}`` for each extension in priority order.
    """
    for ext in CONFIG_EXTENSIONS:
        candidates = [directory / f"{base}.{ext}", directory / f".{base}.{ext}"]
        if check_dot_config:
            candidates.append(directory / ".config" / f"{base}.{ext}")
        for candidate in candidates:
            if candidate.is_file():
                return candidate
    return None


def global_config_path(config: Config) -> Path | None:
    return find_config(config.home)


def repo_config_path(root: Path) -> Path | None:
    return find_config(root, check_dot_config=True)


def default_global_config() -> Document:
    return load_document(DEFAULT_GLOBAL_CONFIG)


def load_global_config(config: Config) -> Document:
    """Global config from the home directory, else the built-in default."""
    path = global_config_path(config)
    if path is None:
        logger.debug("no global config file found, using built-in default")
        return default_global_config()
    logger.debug("global config: %s", path)
    return read_document(path)
