"""Serialize an element tree and its page metadata into an HTML document string."""

from __future__ import annotations

from typing import List

from .dom_model import (
    Attributes,
    Children,
    Element,
    ElementList,
    NoEndTag,
    RawText,
    Text,
    element,
    element_no_end_tag,
    element_raw_text,
)
from .escape import escape_in_html
from .models import (
    HtmlOption,
    color_to_hex_string,
    language_to_ietf_tag,
    twitter_card_to_string,
)

DOCTYPE = "<!doctype html>"

NOSCRIPT_MESSAGE = "ではJavaScriptを使用します。ブラウザの設定で有効にしてください。"


def to_string(option: HtmlOption) -> str:
    """Render a complete document. Event bindings in the tree are ignored."""

    root = element(
        "html",
        {} if option.language is None else {"lang": language_to_ietf_tag(option.language)},
        [head_element(option), body_element(option)],
    )
    return DOCTYPE + element_to_html(root)


def element_to_html(node: Element) -> str:
    """Render one node and its descendants."""

    start_tag = "<" + node.name + _render_attrs(node.attributes) + ">"
    end_tag = "</" + node.name + ">"
    children = node.children
    if isinstance(children, ElementList):
        return start_tag + "".join(element_to_html(child) for _, child in children.items) + end_tag
    if isinstance(children, Text):
        return start_tag + escape_in_html(children.text) + end_tag
    if isinstance(children, RawText):
        # Raw text is trusted by contract.
        return start_tag + children.text + end_tag
    if isinstance(children, NoEndTag):
        return start_tag
    raise TypeError(f"Unsupported children variant: {children!r}")


def _render_attrs(attrs: Attributes) -> str:
    if not attrs:
        return ""
    parts = [
        name if value is None else f'{name}="{escape_in_html(value)}"'
        for name, value in attrs.items()
    ]
    return " " + " ".join(parts)


def head_element(option: HtmlOption) -> Element:
    children: List[Element] = [
        element_no_end_tag("meta", {"charset": "utf-8"}),
        element_no_end_tag(
            "meta",
            {"name": "viewport", "content": "width=device-width,initial-scale=1.0"},
        ),
        element("title", {}, option.page_name),
        element_no_end_tag("meta", {"name": "description", "content": option.description}),
    ]
    if option.theme_color is not None:
        children.append(
            element_no_end_tag(
                "meta",
                {"name": "theme-color", "content": color_to_hex_string(option.theme_color)},
            )
        )
    children.append(element_no_end_tag("link", {"rel": "icon", "href": option.icon_url}))
    if option.manifest_url is not None:
        children.append(
            element_no_end_tag("link", {"rel": "manifest", "href": option.manifest_url})
        )
    if option.style is not None:
        children.append(element_raw_text("style", {}, option.style))
    for style_url in option.style_url_list:
        children.append(element_no_end_tag("link", {"rel": "stylesheet", "href": style_url}))
    children.extend(
        [
            element_no_end_tag(
                "meta",
                {"name": "twitter:card", "content": twitter_card_to_string(option.twitter_card)},
            ),
            _og_meta("og:url", option.url),
            _og_meta("og:title", option.page_name),
            _og_meta("og:site_name", option.app_name),
            _og_meta("og:description", option.description),
            _og_meta("og:image", option.cover_image_url),
        ]
    )
    if option.script is not None:
        children.append(element_raw_text("script", {"type": "module"}, option.script))
    for script_url in option.script_url_list:
        children.append(element("script", {"defer": None, "src": script_url}, []))
    return element("head", {}, children)


def _og_meta(prop: str, content: str) -> Element:
    return element_no_end_tag("meta", {"property": prop, "content": content})


def body_element(option: HtmlOption) -> Element:
    children: Children = option.children
    if option.javascript_required:
        children = append_noscript_description(option.app_name, children)
    return element("body", {} if option.body_class is None else {"class": option.body_class}, children)


def noscript_element(app_name: str) -> Element:
    return element("noscript", {}, app_name + NOSCRIPT_MESSAGE)


def append_noscript_description(app_name: str, children: Children) -> Children:
    """Put the <noscript> notice before the body content."""

    notice = ("noscript", noscript_element(app_name))
    if isinstance(children, ElementList):
        return ElementList((notice,) + children.items)
    if isinstance(children, NoEndTag):
        return ElementList((notice,))
    if isinstance(children, (Text, RawText)):
        return ElementList((notice, ("0", Element(name="div", children=children))))
    raise TypeError(f"Unsupported children variant: {children!r}")


__all__ = [
    "DOCTYPE",
    "NOSCRIPT_MESSAGE",
    "append_noscript_description",
    "body_element",
    "element_to_html",
    "head_element",
    "noscript_element",
    "to_string",
]
