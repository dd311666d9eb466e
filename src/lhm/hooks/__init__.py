"""Hooks: hook names, config merging, annotations and engine dispatch."""

from .annotate import annotate_hooks
from .engine import engine_command, run_engine, write_temp_config
from .merge import (
    merge_documents,
    merge_hook_definition,
    merge_job_lists,
    merge_task_maps,
    strip_task_names,
)
from .models import GIT_HOOKS, SERIAL_HOOKS, STAGING_HOOKS, is_hook_name, job_name, task_names

__all__ = [
    "GIT_HOOKS",
    "SERIAL_HOOKS",
    "STAGING_HOOKS",
    "annotate_hooks",
    "engine_command",
    "is_hook_name",
    "job_name",
    "merge_documents",
    "merge_hook_definition",
    "merge_job_lists",
    "merge_task_maps",
    "run_engine",
    "strip_task_names",
    "task_names",
    "write_temp_config",
]
