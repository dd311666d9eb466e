"""Error hierarchy: LhmError and the config/adapter/engine failures."""

from __future__ import annotations

from pathlib import Path


class LhmError(Exception):
    """Base exception for all lhm errors."""


class ConfigReadError(LhmError):
    """Raised when a required config file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read {path}: {reason}")


class ConfigParseError(LhmError):
    """Raised when a required config file is not a valid document."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to parse {path}: {reason}")


class AdapterSourceError(LhmError):
    """Raised inside an adapter when its third-party source is malformed.

    Never escapes the adapter: it is logged and the adapter contributes nothing.
    """

    def __init__(self, adapter: str, path: Path, reason: str) -> None:
        self.adapter = adapter
        self.path = path
        self.reason = reason
        super().__init__(f"{adapter}: cannot use {path}: {reason}")


class EngineError(LhmError):
    """Raised when the hook-running engine cannot be launched."""

    def __init__(self, engine: str, reason: str, returncode: int = 1) -> None:
        self.engine = engine
        self.returncode = returncode
        super().__init__(f"failed to run {engine}: {reason}")
