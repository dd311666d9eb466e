"""Scheduling annotations: parallel and stage_fixed."""

from __future__ import annotations

import copy
from typing import Any

from .models import SERIAL_HOOKS, STAGING_HOOKS, is_hook_name


def _set_stage_fixed(hook_def: dict) -> None:
    commands = hook_def.get("commands")
    if not isinstance(commands, dict):
        return
    for spec in commands.values():
        if isinstance(spec, dict):
            spec["stage_fixed"] = True


def annotate_hooks(doc: Any) -> Any:
    """Return a copy of *doc* with per-hook scheduling settings injected.

    - ``parallel: true`` on every hook outside SERIAL_HOOKS (overwrites any
      existing value)
    - ``stage_fixed: true`` on each ``commands`` entry of STAGING_HOOKS
    """
    if not isinstance(doc, dict):
        return doc
    result = {}
    for name, value in doc.items():
        # one copy per key: aliased hooks must not share annotations
        hook_def = result[name] = copy.deepcopy(value)
        if not is_hook_name(name) or not isinstance(hook_def, dict):
            continue
        if name not in SERIAL_HOOKS:
            hook_def["parallel"] = True
        if name in STAGING_HOOKS:
            _set_stage_fixed(hook_def)
    return result
