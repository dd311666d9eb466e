"""Hook names and task identity: GIT_HOOKS, SERIAL_HOOKS, STAGING_HOOKS, task_names."""

from __future__ import annotations

from typing import Any

GIT_HOOKS = (
    "applypatch-msg",
    "commit-msg",
    "fsmonitor-watchman",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-receive",
    "post-rewrite",
    "post-update",
    "pre-applypatch",
    "pre-auto-gc",
    "pre-commit",
    "pre-merge-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "prepare-commit-msg",
    "push-to-checkout",
    "reference-transaction",
    "sendemail-validate",
    "update",
)

# Tasks here edit the commit message file or the index/working tree.
SERIAL_HOOKS = frozenset(
    {
        "applypatch-msg",
        "commit-msg",
        "pre-commit",
        "pre-merge-commit",
        "prepare-commit-msg",
    }
)

# Hooks whose formatters may rewrite staged files.
STAGING_HOOKS = frozenset({"pre-commit", "pre-merge-commit"})

TASK_MAP_KEYS = ("commands", "scripts")
JOBS_KEY = "jobs"


def is_hook_name(name: Any) -> bool:
    return isinstance(name, str) and name in GIT_HOOKS


def job_name(job: Any) -> str | None:
    """The ``name`` of a jobs entry, or None for unnamed entries."""
    if isinstance(job, dict):
        name = job.get("name")
        if isinstance(name, str):
            return name
    return None


def task_names(hook_def: Any) -> set[str]:
    """Every task identity declared in a hook definition, across all formats."""
    names: set[str] = set()
    if not isinstance(hook_def, dict):
        return names
    for key in TASK_MAP_KEYS:
        tasks = hook_def.get(key)
        if isinstance(tasks, dict):
            names.update(k for k in tasks if isinstance(k, str))
    jobs = hook_def.get(JOBS_KEY)
    if isinstance(jobs, list):
        for job in jobs:
            if (name := job_name(job)) is not None:
                names.add(name)
    return names
