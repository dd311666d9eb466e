"""Adapter for pre-commit: translates ``repo: local`` hooks into lefthook commands.

Remote repos are skipped. Their ``entry`` lives in the remote
``.pre-commit-hooks.yaml`` and is never fetched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from lhm.core.errors import AdapterSourceError

from .base import Adapter

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pre-commit-config.yaml"
LOCAL_REPO = "local"
FILES_PLACEHOLDER = "{staged_files}"

# pre-commit file-type tag -> extensions. Tags like file/text/executable
# have no extension and are absent on purpose.
TYPE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "python": ("py",),
    "javascript": ("js",),
    "jsx": ("jsx",),
    "typescript": ("ts",),
    "tsx": ("tsx",),
    "ruby": ("rb",),
    "rust": ("rs",),
    "go": ("go",),
    "java": ("java",),
    "c": ("c",),
    "c++": ("cpp",),
    "cpp": ("cpp",),
    "c#": ("cs",),
    "csharp": ("cs",),
    "yaml": ("yml", "yaml"),
    "json": ("json",),
    "toml": ("toml",),
    "markdown": ("md",),
    "shell": ("sh",),
    "bash": ("sh",),
    "zsh": ("sh",),
    "sh": ("sh",),
    "css": ("css",),
    "scss": ("scss",),
    "html": ("html",),
    "xml": ("xml",),
    "sql": ("sql",),
    "swift": ("swift",),
    "kotlin": ("kt",),
    "scala": ("scala",),
    "haskell": ("hs",),
    "lua": ("lua",),
    "perl": ("pl",),
    "php": ("php",),
    "r": ("R",),
}


@dataclass
class PreCommitHook:
    """One entry under a repo's ``hooks`` list."""

    id: str
    entry: str | None = None
    args: list[str] = field(default_factory=list)
    stages: list[str] = field(default_factory=list)
    files: str | None = None
    exclude: str | None = None
    pass_filenames: bool = True
    types: list[str] = field(default_factory=list)
    types_or: list[str] = field(default_factory=list)


@dataclass
class Repo:
    repo: str
    hooks: list[PreCommitHook] = field(default_factory=list)


@dataclass
class PreCommitConfig:
    """The subset of ``.pre-commit-config.yaml`` this adapter understands."""

    repos: list[Repo] = field(default_factory=list)
    default_stages: list[str] = field(default_factory=list)


# ── Parsing ─────────────────────────────────────────────────────────


def _str_list(raw: dict, key: str, where: str) -> list[str]:
    val = raw.get(key)
    if val is None:
        return []
    if not isinstance(val, list):
        raise ValueError(f"{where}: '{key}' must be a list")
    return [str(v) for v in val]


def _opt_str(raw: dict, key: str, where: str) -> str | None:
    val = raw.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ValueError(f"{where}: '{key}' must be a string")
    return val


def _parse_hook(raw: Any, where: str) -> PreCommitHook:
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: hook must be a mapping")
    hook_id = raw.get("id")
    if not isinstance(hook_id, str):
        raise ValueError(f"{where}: hook is missing 'id'")
    where = f"{where}: hook {hook_id!r}"
    pass_filenames = raw.get("pass_filenames", True)
    if not isinstance(pass_filenames, bool):
        raise ValueError(f"{where}: 'pass_filenames' must be a boolean")
    return PreCommitHook(
        id=hook_id,
        entry=_opt_str(raw, "entry", where),
        args=_str_list(raw, "args", where),
        stages=_str_list(raw, "stages", where),
        files=_opt_str(raw, "files", where),
        exclude=_opt_str(raw, "exclude", where),
        pass_filenames=pass_filenames,
        types=_str_list(raw, "types", where),
        types_or=_str_list(raw, "types_or", where),
    )


def _parse_repo(raw: Any, index: int) -> Repo:
    where = f"repos[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: repo must be a mapping")
    repo = raw.get("repo")
    if not isinstance(repo, str):
        raise ValueError(f"{where}: missing 'repo'")
    hooks = raw.get("hooks") or []
    if not isinstance(hooks, list):
        raise ValueError(f"{where}: 'hooks' must be a list")
    return Repo(repo=repo, hooks=[_parse_hook(h, where) for h in hooks])


def parse_pre_commit_config(data: Any) -> PreCommitConfig:
    """Build a PreCommitConfig from parsed YAML. Raises ValueError when malformed."""
    if data is None:
        return PreCommitConfig()
    if not isinstance(data, dict):
        raise ValueError("top level must be a mapping")
    repos = data.get("repos") or []
    if not isinstance(repos, list):
        raise ValueError("'repos' must be a list")
    return PreCommitConfig(
        repos=[_parse_repo(r, i) for i, r in enumerate(repos)],
        default_stages=_str_list(data, "default_stages", "config"),
    )


def load_pre_commit_config(path: Path) -> PreCommitConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return parse_pre_commit_config(data)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
        raise AdapterSourceError("pre-commit", path, " ".join(str(e).split())) from e


# ── Translation ─────────────────────────────────────────────────────


def hook_matches_stage(hook: PreCommitHook, default_stages: list[str], hook_name: str) -> bool:
    """Hook's own stages, else default_stages; empty means every stage."""
    stages = hook.stages or default_stages
    return not stages or hook_name in stages


def types_to_glob(types: list[str], types_or: list[str]) -> str | None:
    """Combine ``types`` and ``types_or`` into one lefthook glob.

    Extensions keep the order in which the type table yields them, without
    duplicates; unknown tags contribute nothing.
    """
    extensions: list[str] = []
    for tag in [*types, *types_or]:
        for ext in TYPE_EXTENSIONS.get(tag, ()):
            if ext not in extensions:
                extensions.append(ext)
    if not extensions:
        return None
    if len(extensions) == 1:
        return f"*.{extensions[0]}"
    return "*.{" + ",".join(extensions) + "}"


def translate_hook(hook: PreCommitHook) -> dict | None:
    """Lefthook command for a local hook, or None when it has no ``entry``."""
    if hook.entry is None:
        return None
    parts = [hook.entry, *hook.args]
    if hook.pass_filenames:
        parts.append(FILES_PLACEHOLDER)

    cmd: dict[str, Any] = {"run": " ".join(parts)}
    if hook.files is not None:
        cmd["files"] = hook.files
    if hook.exclude is not None:
        cmd["exclude"] = hook.exclude
    if glob := types_to_glob(hook.types, hook.types_or):
        cmd["glob"] = glob
    return cmd


class PreCommitAdapter(Adapter):
    name = "pre-commit"

    def detect(self, root: Path) -> bool:
        return (root / CONFIG_FILENAME).is_file()

    def generate(self, root: Path, hook_name: str) -> dict | None:
        try:
            config = load_pre_commit_config(root / CONFIG_FILENAME)
        except AdapterSourceError as e:
            logger.debug("%s", e)
            return None

        commands: dict[str, dict] = {}
        for repo in config.repos:
            if repo.repo != LOCAL_REPO:
                continue
            for hook in repo.hooks:
                if not hook_matches_stage(hook, config.default_stages, hook_name):
                    continue
                if (cmd := translate_hook(hook)) is not None:
                    commands[hook.id] = cmd

        if not commands:
            return None
        return {"commands": commands}
