"""Convenience constructors for common elements.

Styling is resolved by the caller: pass the class name produced by whatever
style-to-class-name function the application uses as ``class_name``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional, Sequence, Union

from .dom_model import Element, NoEndTag, element, element_no_end_tag
from .events import Events

ChildrenArg = Union[str, Sequence[Element], Mapping[str, Element]]


def _common_attributes(id: Optional[str], class_name: Optional[str]) -> Dict[str, Optional[str]]:
    attributes: Dict[str, Optional[str]] = {}
    if id is not None:
        attributes["id"] = id
    if class_name is not None:
        attributes["class"] = class_name
    return attributes


def h1(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    """Page heading."""
    return element("h1", _common_attributes(id, class_name), children, events)


def h2(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    return element("h2", _common_attributes(id, class_name), children, events)


def h3(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    return element("h3", _common_attributes(id, class_name), children, events)


def div(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    return element("div", _common_attributes(id, class_name), children, events)


def section(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    return element("section", _common_attributes(id, class_name), children, events)


def quote(
    children: ChildrenArg,
    *,
    cite: Optional[str] = None,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
) -> Element:
    attributes = _common_attributes(id, class_name)
    if cite is not None:
        attributes["cite"] = cite
    return element("q", attributes, children)


def code(children: ChildrenArg, *, id: Optional[str] = None, class_name: Optional[str] = None) -> Element:
    return element("code", _common_attributes(id, class_name), children)


def anchor(
    url: str,
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    """``<a href=url>``.

    For in-app navigation bind ``ClickMessageData(..., ignore_new_tab=True)``
    so that ctrl/middle clicks still open a new tab.
    """
    attributes = _common_attributes(id, class_name)
    attributes["href"] = url
    return element("a", attributes, children, events)


def button(
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    disabled: bool = False,
    events: Optional[Events] = None,
) -> Element:
    attributes = _common_attributes(id, class_name)
    if disabled:
        attributes["disabled"] = None
    return element("button", attributes, children, events)


def image(src: str, alt: str, *, id: Optional[str] = None, class_name: Optional[str] = None) -> Element:
    """``<img>``; ``src`` may also be a blob URL."""
    attributes = _common_attributes(id, class_name)
    attributes["alt"] = alt
    attributes["src"] = src
    return element_no_end_tag("img", attributes)


def label(
    target_element_id: str,
    children: ChildrenArg,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
) -> Element:
    attributes = _common_attributes(id, class_name)
    attributes["for"] = target_element_id
    return element("label", attributes, children)


def input_text(
    value: str,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    """One-line text input. Bind ``on_input`` to receive each edit."""
    attributes = _common_attributes(id, class_name)
    attributes["type"] = "text"
    if name is not None:
        attributes["name"] = name
    attributes["value"] = value
    return Element(name="input", attributes=attributes, children=NoEndTag(), events=events)


def input_radio(
    group_name: str,
    *,
    checked: bool = False,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    """Radio button; ``group_name`` ties the choices of one group together."""
    attributes = _common_attributes(id, class_name)
    attributes["type"] = "radio"
    attributes["name"] = group_name
    if checked:
        attributes["checked"] = None
    return Element(name="input", attributes=attributes, children=NoEndTag(), events=events)


def text_area(
    value: str,
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    return element("textarea", _common_attributes(id, class_name), value, events)


@dataclass(frozen=True)
class ViewBox:
    x: float
    y: float
    width: float
    height: float


def _number(value: Union[int, float, str]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def svg(
    view_box: ViewBox,
    children: Sequence[Element],
    *,
    id: Optional[str] = None,
    class_name: Optional[str] = None,
    events: Optional[Events] = None,
) -> Element:
    attributes = _common_attributes(id, class_name)
    attributes["viewBox"] = " ".join(
        _number(value) for value in (view_box.x, view_box.y, view_box.width, view_box.height)
    )
    return element("svg", attributes, children, events)


def path(d: str, fill: str, *, id: Optional[str] = None, class_name: Optional[str] = None) -> Element:
    attributes = _common_attributes(id, class_name)
    attributes["d"] = d
    attributes["fill"] = fill
    return element("path", attributes, "")


@dataclass(frozen=True)
class SvgAnimation:
    """Infinitely repeating SVG attribute animation."""

    attribute_name: Literal["cy", "r", "stroke"]
    dur: float
    from_: Union[float, str]
    to: Union[float, str]


def animate(animation: SvgAnimation) -> Element:
    return element(
        "animate",
        {
            "attributeName": animation.attribute_name,
            "dur": _number(animation.dur),
            "from": _number(animation.from_),
            "repeatCount": "indefinite",
            "to": _number(animation.to),
        },
        "",
    )


def circle(
    cx: float,
    cy: float,
    r: float,
    *,
    fill: str,
    stroke: str,
    animations: Sequence[SvgAnimation] = (),
    id: Optional[str] = None,
    class_name: Optional[str] = None,
) -> Element:
    """SVG circle with optional <animate> children.

    Animations are keyed by ``attribute_name``; when two target the same
    attribute only the last one is kept.
    """

    attributes = _common_attributes(id, class_name)
    attributes.update(
        {"cx": _number(cx), "cy": _number(cy), "fill": fill, "r": _number(r), "stroke": stroke}
    )
    if not animations:
        return element("circle", attributes, "")
    return element(
        "circle",
        attributes,
        {animation.attribute_name: animate(animation) for animation in animations},
    )


__all__ = [
    "SvgAnimation",
    "ViewBox",
    "anchor",
    "animate",
    "button",
    "circle",
    "code",
    "div",
    "h1",
    "h2",
    "h3",
    "image",
    "input_radio",
    "input_text",
    "label",
    "path",
    "quote",
    "section",
    "svg",
    "text_area",
]
