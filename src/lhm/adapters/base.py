"""Adapter interface for third-party git hook managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class Adapter(ABC):
    """Detects one hook manager and translates it into lefthook config.

    ``generate`` returns the hook definition (``{"commands": {...}}``) for a
    single hook name, or None when the manager has nothing to run for it.
    An empty definition and None are different: callers skip None.
    """

    name: str = ""

    @abstractmethod
    def detect(self, root: Path) -> bool:
        """True if this manager's files are present under *root*."""

    @abstractmethod
    def generate(self, root: Path, hook_name: str) -> dict | None:
        """Hook definition for *hook_name*, or None."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
