"""Declarative page descriptions loaded from YAML or JSON.

A page file holds the :class:`~htmlview.models.HtmlOption` fields (camelCase
or snake_case) and a ``body``::

    pageName: Top
    appName: Example
    description: An example page
    iconUrl: https://example.com/icon.png
    coverImageUrl: https://example.com/cover.png
    url: https://example.com/
    language: English
    body:
      - name: h1
        text: Hello
      - key: save
        name: button
        attributes: {disabled: null}
        text: Save
        events:
          onClick: {message: save, ignoreNewTab: false}

Messages declared in a file are plain data. Input and pointer handlers take a
message name and produce ``{"message": name, "value": ...}`` and
``{"message": name, "pointer": {...}}`` respectively.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .dom_model import Children, Element, ElementList, NoEndTag, RawText, Text
from .events import ClickMessageData, Events, Pointer
from .io_utils import read_structured
from .models import HtmlOption


class ClickSpec(BaseModel):
    message: Any = Field(..., description="Message sent to the application on click.")
    ignore_new_tab: bool = Field(False, alias="ignoreNewTab")
    stop_propagation: bool = Field(False, alias="stopPropagation")

    model_config = ConfigDict(populate_by_name=True)


class EventsSpec(BaseModel):
    """Declarative bindings for one node."""

    on_click: Optional[ClickSpec] = Field(None, alias="onClick")
    on_change: Optional[Any] = Field(None, alias="onChange")
    on_input: Optional[str] = Field(
        None, alias="onInput", description="Message name; the new value is attached."
    )
    on_pointer_move: Optional[str] = Field(
        None, alias="onPointerMove", description="Message name; the pointer sample is attached."
    )
    on_pointer_down: Optional[str] = Field(
        None, alias="onPointerDown", description="Message name; the pointer sample is attached."
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_events(self) -> Events:
        return Events(
            on_click=None
            if self.on_click is None
            else ClickMessageData(
                message=self.on_click.message,
                ignore_new_tab=self.on_click.ignore_new_tab,
                stop_propagation=self.on_click.stop_propagation,
            ),
            on_change=self.on_change,
            on_input=None if self.on_input is None else _value_message(self.on_input),
            on_pointer_move=None
            if self.on_pointer_move is None
            else _pointer_message(self.on_pointer_move),
            on_pointer_down=None
            if self.on_pointer_down is None
            else _pointer_message(self.on_pointer_down),
        )


def _value_message(name: str):
    def to_message(value: str) -> Dict[str, Any]:
        return {"message": name, "value": value}

    return to_message


def _pointer_message(name: str):
    def to_message(pointer: Pointer) -> Dict[str, Any]:
        return {"message": name, "pointer": asdict(pointer)}

    return to_message


class NodeSpec(BaseModel):
    """One element. Exactly one of ``text``, ``rawText``, ``children`` or ``noEndTag`` may be set."""

    name: str = Field(..., description="Tag name, used verbatim.")
    key: Optional[str] = Field(
        None, description="Key among siblings; defaults to the position in the list."
    )
    attributes: Dict[str, Optional[str]] = Field(
        default_factory=dict, description="Attribute map; null renders a bare attribute."
    )
    text: Optional[str] = None
    raw_text: Optional[str] = Field(None, alias="rawText")
    children: Optional[List["NodeSpec"]] = None
    no_end_tag: bool = Field(False, alias="noEndTag")
    events: Optional[EventsSpec] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _single_content(self) -> "NodeSpec":
        given = [
            label
            for label, present in (
                ("text", self.text is not None),
                ("rawText", self.raw_text is not None),
                ("children", self.children is not None),
                ("noEndTag", self.no_end_tag),
            )
            if present
        ]
        if len(given) > 1:
            raise ValueError(f"<{self.name}> sets more than one of {', '.join(given)}")
        return self

    def to_children(self) -> Children:
        if self.text is not None:
            return Text(self.text)
        if self.raw_text is not None:
            return RawText(self.raw_text)
        if self.no_end_tag:
            return NoEndTag()
        return nodes_to_children(self.children or [])

    def to_element(self) -> Element:
        return Element(
            name=self.name,
            attributes=dict(self.attributes),
            children=self.to_children(),
            events=None if self.events is None else self.events.to_events(),
        )


def nodes_to_children(nodes: List[NodeSpec]) -> ElementList:
    return ElementList(
        tuple(
            (node.key if node.key is not None else str(index), node.to_element())
            for index, node in enumerate(nodes)
        )
    )


class PageConfig(HtmlOption):
    """``HtmlOption`` whose body is described declaratively."""

    body: Union[str, List[NodeSpec]] = Field(
        default_factory=list, description="Body text or list of top-level nodes."
    )

    @model_validator(mode="before")
    @classmethod
    def _body_not_children(cls, data: Any) -> Any:
        if isinstance(data, dict) and "children" in data:
            raise ValueError("page content goes under 'body', not 'children'")
        return data

    def to_html_option(self) -> HtmlOption:
        fields = {name: getattr(self, name) for name in HtmlOption.model_fields}
        fields["children"] = Text(self.body) if isinstance(self.body, str) else nodes_to_children(self.body)
        return HtmlOption.model_validate(fields)


def load_page_config(path: Path) -> PageConfig:
    """Read and validate a page file; problems are reported as ``SystemExit``."""

    if not path.exists():
        raise SystemExit(f"Page file not found: {path}")
    try:
        payload = read_structured(path) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Unreadable page file {path}: {exc}") from exc
    try:
        return PageConfig.model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Invalid page file {path}: {exc}") from exc


__all__ = [
    "ClickSpec",
    "EventsSpec",
    "NodeSpec",
    "PageConfig",
    "load_page_config",
    "nodes_to_children",
]
