"""Flatten the event bindings of an element tree into a path-keyed map."""

from __future__ import annotations

from typing import Dict, Union

from .dom_model import Children, Element, ElementList
from .events import Events
from .path import ROOT_PATH, ElementPath, path_append_key

EventMap = Dict[ElementPath, Events]


def build_event_map(tree: Union[Children, Element]) -> EventMap:
    """Collect every bound element under ``tree``.

    A children value (such as the body content) is addressed from the root
    path; a single element sits at the root path itself. A duplicate path
    keeps the binding inserted last.
    """

    event_map: EventMap = {}
    if isinstance(tree, Element):
        _collect_element(tree, ROOT_PATH, event_map)
    else:
        _collect_children(tree, ROOT_PATH, event_map)
    return event_map


def _collect_element(node: Element, path: ElementPath, event_map: EventMap) -> None:
    if node.events is not None:
        event_map[path] = node.events
    _collect_children(node.children, path, event_map)


def _collect_children(children: Children, path: ElementPath, event_map: EventMap) -> None:
    if not isinstance(children, ElementList):
        return
    for key, child in children.items:
        _collect_element(child, path_append_key(path, key), event_map)


__all__ = ["EventMap", "build_event_map"]
