"""Adapter for husky: runs ``.husky/<hook>`` when that script exists."""

from __future__ import annotations

from pathlib import Path

from .base import Adapter

HUSKY_DIR = ".husky"
TASK_NAME = "husky"


class HuskyAdapter(Adapter):
    name = "husky"

    def detect(self, root: Path) -> bool:
        return (root / HUSKY_DIR).is_dir()

    def generate(self, root: Path, hook_name: str) -> dict | None:
        if not (root / HUSKY_DIR / hook_name).is_file():
            return None
        return {"commands": {TASK_NAME: {"run": f"{HUSKY_DIR}/{hook_name}"}}}
