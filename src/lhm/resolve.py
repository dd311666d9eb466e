"""Config resolution: global + (repo config | adapter config), then annotations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from lhm.adapters import adapter_document
from lhm.core.config import Config, load_global_config, repo_config_path
from lhm.core.document import read_document
from lhm.core.utils import repo_root
from lhm.hooks import annotate_hooks, merge_documents

logger = logging.getLogger(__name__)


def merge_sources(global_doc: Any, repo_path: Path | None, adapter_doc: Any | None) -> Any:
    """Merge the global config with the repo config, else with the adapter config."""
    if repo_path is not None:
        return merge_documents(global_doc, read_document(repo_path))
    if adapter_doc:
        return merge_documents(global_doc, adapter_doc)
    return global_doc


def resolve_config(config: Config, root: Path | None = None) -> Any:
    """Build the final, annotated config for the repo at *root* (default: git toplevel).

    Raises LhmError when the global or repo config cannot be read or parsed.
    """
    global_doc = load_global_config(config)
    if root is None:
        root = repo_root(config.cwd)
    logger.debug("repo root: %s", root)

    repo_path = repo_config_path(root) if root is not None else None
    adapter_doc = None
    if repo_path is not None:
        logger.debug("repo config: %s", repo_path)
    elif root is not None:
        adapter_doc = adapter_document(root)

    return annotate_hooks(merge_sources(global_doc, repo_path, adapter_doc))
