"""Adapters: translate third-party hook managers into lefthook config."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lhm.hooks.merge import merge_hook_definition
from lhm.hooks.models import GIT_HOOKS

from .base import Adapter
from .hooks_dir import HooksDirAdapter
from .husky import HuskyAdapter
from .pre_commit import PreCommitAdapter

logger = logging.getLogger(__name__)

# Priority order: the first adapter that detects its manager is used.
ALL_ADAPTERS: tuple[Adapter, ...] = (PreCommitAdapter(), HuskyAdapter(), HooksDirAdapter())


def detect_adapter(root: Path) -> Adapter | None:
    for adapter in ALL_ADAPTERS:
        if adapter.detect(root):
            return adapter
    return None


def adapter_document(root: Path, hook_names: Iterable[str] = GIT_HOOKS) -> dict | None:
    """Config generated by the detected adapter for every hook name.

    Returns None when no adapter applies or none of the hooks produced a fragment.
    """
    adapter = detect_adapter(root)
    if adapter is None:
        return None
    logger.debug("detected adapter: %s", adapter.name)

    doc: dict = {}
    for hook_name in hook_names:
        fragment = adapter.generate(root, hook_name)
        if fragment is None:
            continue
        if hook_name in doc:
            doc[hook_name] = merge_hook_definition(doc[hook_name], fragment)
        else:
            doc[hook_name] = fragment
    if not doc:
        logger.debug("adapter %s has no config for any hook", adapter.name)
        return None
    return doc


__all__ = [
    "ALL_ADAPTERS",
    "Adapter",
    "HooksDirAdapter",
    "HuskyAdapter",
    "PreCommitAdapter",
    "adapter_document",
    "detect_adapter",
]
