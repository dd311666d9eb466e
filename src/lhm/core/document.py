"""Document model: read_document, dump_document, strip_json_comments."""

from __future__ import annotations

import copy
import json
import tomllib
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import ConfigParseError, ConfigReadError, LhmError

# Plain Python values; dicts keep insertion order through read-modify-write.
Document = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class UnsharedLoader(yaml.SafeLoader):
    """SafeLoader that gives every alias its own copy of the anchored node.

    Plain SafeLoader returns one shared object per anchor, so writing into one
    hook would leak into every hook that aliases it.
    """

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            anchor = self.peek_event().anchor
            if anchor in self.anchors:
                self.get_event()
                return copy.deepcopy(self.anchors[anchor])
        return super().compose_node(parent, index)


def _load_yaml(text: str) -> Document:
    data = yaml.load(text, Loader=UnsharedLoader)
    return {} if data is None else data


def strip_json_comments(text: str) -> str:
    """Remove // and /* */ comments that sit outside JSON strings."""
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
        elif ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end == -1 else end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _parse(text: str, suffix: str) -> Document:
    if suffix == ".json":
        return json.loads(text) if text.strip() else {}
    if suffix == ".jsonc":
        stripped = strip_json_comments(text)
        return json.loads(stripped) if stripped.strip() else {}
    if suffix == ".toml":
        return tomllib.loads(text)
    return _load_yaml(text)


def read_document(path: Path) -> Document:
    """Read and parse a config file, choosing the codec from its suffix.

    YAML is the default for unknown suffixes. An empty file is ``{}``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e
    try:
        return _parse(text, path.suffix.lower())
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigParseError(path, " ".join(str(e).split())) from e


def load_document(text: str) -> Document:
    """Parse YAML text into a document."""
    return _load_yaml(text)


def dump_document(doc: Document) -> str:
    """Serialize a document as block-style YAML, preserving key order.

    Raises LhmError for values YAML cannot represent (e.g. a TOML local time).
    """
    try:
        return yaml.safe_dump(
            doc, sort_keys=False, default_flow_style=False, allow_unicode=True
        )
    except yaml.YAMLError as e:
        reason = " ".join(str(e).split())
        raise LhmError(f"cannot write merged config: {reason}") from e
