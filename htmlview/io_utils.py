"""Helpers for reading page descriptions and writing rendered output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

YAML_SUFFIXES = (".yaml", ".yml")


def stable_json_dumps(obj: object, *, indent: int = 2) -> str:
    """Sorted-key JSON with non-ASCII text kept as is and a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=indent) + "\n"


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_structured(path: Path) -> Any:
    """Load a YAML or JSON document, chosen by file suffix."""

    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(path)
    return read_json(path)


def write_html(path: PathLike, html_text: str) -> Path:
    """Write rendered output as UTF-8, creating the output directory first."""

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html_text, encoding="utf-8")
    return out


__all__ = ["read_json", "read_structured", "read_yaml", "stable_json_dumps", "write_html"]
