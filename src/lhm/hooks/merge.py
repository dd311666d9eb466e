"""Config merging: merge_documents, merge_hook_definition, merge_job_lists.

The overlay (repo config or adapter-generated config) takes precedence over
the global config. Task identities are compared across the ``commands``,
``scripts`` and ``jobs`` formats so a task that changes representation
between the two documents still resolves exactly once.

None of these functions mutate their arguments.
"""

from __future__ import annotations

import copy
from typing import Any

from .models import JOBS_KEY, TASK_MAP_KEYS, is_hook_name, job_name, task_names


def merge_documents(global_doc: Any, overlay: Any) -> Any:
    """Merge two whole documents. Overlay wins on every non-hook key."""
    if not isinstance(global_doc, dict) or not isinstance(overlay, dict):
        return copy.deepcopy(overlay)

    merged = copy.deepcopy(global_doc)
    for key, overlay_val in overlay.items():
        if is_hook_name(key) and key in merged:
            merged[key] = merge_hook_definition(merged[key], overlay_val)
        else:
            merged[key] = copy.deepcopy(overlay_val)
    return merged


def strip_task_names(hook_def: dict, names: set[str]) -> dict:
    """Drop tasks whose identity is in *names* from every format.

    A container left empty by the removal is dropped entirely.
    """
    result = dict(hook_def)
    for key in TASK_MAP_KEYS:
        tasks = result.get(key)
        if isinstance(tasks, dict):
            kept = {k: v for k, v in tasks.items() if k not in names}
            if kept:
                result[key] = kept
            else:
                del result[key]
    jobs = result.get(JOBS_KEY)
    if isinstance(jobs, list):
        kept_jobs = [j for j in jobs if job_name(j) not in names]
        if kept_jobs:
            result[JOBS_KEY] = kept_jobs
        else:
            del result[JOBS_KEY]
    return result


def merge_task_maps(global_tasks: Any, overlay_tasks: Any) -> Any:
    """Merge two ``commands``/``scripts`` maps by task name."""
    if not isinstance(global_tasks, dict) or not isinstance(overlay_tasks, dict):
        return copy.deepcopy(overlay_tasks)
    merged = copy.deepcopy(global_tasks)
    for name, spec in overlay_tasks.items():
        merged[name] = copy.deepcopy(spec)
    return merged


def merge_job_lists(global_jobs: Any, overlay_jobs: Any) -> Any:
    """Global jobs not shadowed by name, in order, then every overlay job.

    Unnamed jobs have no identity: they are never dropped and always appended.
    """
    if not isinstance(global_jobs, list) or not isinstance(overlay_jobs, list):
        return copy.deepcopy(overlay_jobs)
    overlay_names = {name for name in map(job_name, overlay_jobs) if name is not None}
    kept = [job for job in global_jobs if job_name(job) not in overlay_names]
    return copy.deepcopy(kept) + copy.deepcopy(overlay_jobs)


def merge_hook_definition(global_def: Any, overlay_def: Any) -> Any:
    """Merge two definitions of the same hook."""
    if not isinstance(global_def, dict) or not isinstance(overlay_def, dict):
        return copy.deepcopy(overlay_def)

    merged = copy.deepcopy(global_def)
    names = task_names(overlay_def)
    if names:
        merged = strip_task_names(merged, names)

    for key, overlay_val in overlay_def.items():
        if key in TASK_MAP_KEYS and key in merged:
            merged[key] = merge_task_maps(merged[key], overlay_val)
        elif key == JOBS_KEY and key in merged:
            merged[key] = merge_job_lists(merged[key], overlay_val)
        else:
            merged[key] = copy.deepcopy(overlay_val)
    return merged
