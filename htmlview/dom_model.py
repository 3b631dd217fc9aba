"""Element tree model for HTML serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:  # pragma: no cover
    from .events import Events


Attributes = Mapping[str, Optional[str]]


@dataclass(frozen=True)
class ElementList:
    """Ordered child elements, each addressed by a key unique among its siblings."""

    items: Tuple[Tuple[str, "Element"], ...] = ()

    def elements(self) -> list["Element"]:
        return [child for _, child in self.items]

    def keys(self) -> list[str]:
        return [key for key, _ in self.items]


@dataclass(frozen=True)
class Text:
    """Text escaped on output."""

    text: str


@dataclass(frozen=True)
class RawText:
    """Trusted text emitted verbatim, e.g. a `<style>` or `<script>` body."""

    text: str


@dataclass(frozen=True)
class NoEndTag:
    """Void element: no children and no closing tag."""


Children = Union[ElementList, Text, RawText, NoEndTag]

ChildrenLike = Union[Children, str, Sequence["Element"], Mapping[str, "Element"]]


@dataclass(frozen=True)
class Element:
    """A single markup node.

    Attribute names must already be valid; they are never escaped or checked.
    An attribute value of ``None`` renders as a bare key (``<button disabled>``).
    ``events`` is never rendered; it is only read when building the event map.
    """

    name: str
    attributes: Attributes = field(default_factory=dict)
    children: Children = field(default_factory=ElementList)
    events: Optional["Events"] = field(default=None, compare=False)


def to_children(value: Any) -> Children:
    """Coerce a string, a sequence or a keyed mapping of elements into a children variant."""

    if isinstance(value, (ElementList, Text, RawText, NoEndTag)):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, Mapping):
        return ElementList(tuple((str(key), child) for key, child in value.items()))
    return ElementList(tuple((str(index), child) for index, child in enumerate(value)))


def element(
    name: str,
    attributes: Optional[Attributes] = None,
    children: ChildrenLike = (),
    events: Optional["Events"] = None,
) -> Element:
    """Low-level constructor for elements that have no dedicated helper."""

    return Element(
        name=name,
        attributes=dict(attributes or {}),
        children=to_children(children),
        events=events,
    )


def element_raw_text(name: str, attributes: Optional[Attributes], text: str) -> Element:
    """Element whose text content is not escaped.

    ``element_raw_text("script", {"type": "x-shader/x-vertex"}, source)``
    """

    return Element(name=name, attributes=dict(attributes or {}), children=RawText(text))


def element_no_end_tag(name: str, attributes: Optional[Attributes] = None) -> Element:
    """Element without a closing tag, such as ``<meta name="...">``."""

    return Element(name=name, attributes=dict(attributes or {}), children=NoEndTag())


__all__ = [
    "Attributes",
    "Children",
    "Element",
    "ElementList",
    "NoEndTag",
    "RawText",
    "Text",
    "element",
    "element_no_end_tag",
    "element_raw_text",
    "to_children",
]
