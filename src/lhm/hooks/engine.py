"""Hook dispatch: write the merged config to a temp file and run the engine."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

from lhm.core.document import dump_document
from lhm.core.errors import EngineError

if TYPE_CHECKING:
    from lhm.core.config import Config

logger = logging.getLogger(__name__)


def write_temp_config(doc: Any) -> Path:
    """Serialize *doc* to a private ``.yml`` temp file and return its path."""
    content = dump_document(doc)
    logger.debug("merged config:\n%s", content)
    fd, name = tempfile.mkstemp(prefix="lhm-", suffix=".yml")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError:
        Path(name).unlink(missing_ok=True)
        raise
    return Path(name)


def engine_command(config: Config, hook_name: str, args: list[str]) -> list[str]:
    return [config.engine, "run", hook_name, "--no-auto-install", *args]


def run_engine(config: Config, hook_name: str, args: list[str], doc: Any) -> int:
    """Run the engine for *hook_name* against *doc*. Returns its exit code.

    The temp config is removed on every exit path.
    """
    path = write_temp_config(doc)
    try:
        cmd = engine_command(config, hook_name, args)
        env = {**os.environ, config.config_env_var: str(path)}
        logger.debug("%s=%s", config.config_env_var, path)
        logger.debug("running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, env=env)
        except OSError as e:
            raise EngineError(config.engine, str(e)) from e
        if result.returncode < 0:
            # killed by signal N: report 128 + N like a shell
            return 128 - result.returncode
        return result.returncode
    finally:
        path.unlink(missing_ok=True)
