"""Structural paths naming a position in the keyed element tree."""

from __future__ import annotations

from typing import Iterable, NewType

ElementPath = NewType("ElementPath", str)

ROOT_PATH = ElementPath("")

SEPARATOR = "/"


def path_append_key(path: ElementPath, key: str) -> ElementPath:
    return ElementPath(path + SEPARATOR + key)


def path_from_keys(keys: Iterable[str]) -> ElementPath:
    """``["main", "button"]`` -> ``"/main/button"``."""

    path = ROOT_PATH
    for key in keys:
        path = path_append_key(path, key)
    return path


__all__ = ["ElementPath", "ROOT_PATH", "SEPARATOR", "path_append_key", "path_from_keys"]
