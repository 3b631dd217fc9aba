"""Pydantic models for page-level document metadata."""

import math
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dom_model import Children, Element, ElementList, to_children

Language = Literal["Japanese", "English", "Esperanto"]

TwitterCard = Literal["SummaryCard", "SummaryCardWithLargeImage"]

LANGUAGE_TO_IETF_TAG: dict[str, str] = {
    "Japanese": "ja",
    "English": "en",
    "Esperanto": "eo",
}

TWITTER_CARD_TO_CONTENT: dict[str, str] = {
    "SummaryCard": "summary",
    "SummaryCardWithLargeImage": "summary_large_image",
}


def language_to_ietf_tag(language: Language) -> str:
    return LANGUAGE_TO_IETF_TAG[language]


def twitter_card_to_string(twitter_card: TwitterCard) -> str:
    return TWITTER_CARD_TO_CONTENT[twitter_card]


class Color(BaseModel):
    """RGB colour; each channel is expected in the range 0...1."""

    r: float = Field(..., allow_inf_nan=False, description="Red channel.")
    g: float = Field(..., allow_inf_nan=False, description="Green channel.")
    b: float = Field(..., allow_inf_nan=False, description="Blue channel.")

    model_config = ConfigDict(frozen=True)

    def to_hex(self) -> str:
        return color_to_hex_string(self)


def _channel_to_byte_string(value: float) -> str:
    """Map 0...1 to 00...ff, clamping after flooring."""

    return format(max(min(math.floor(value * 256), 255), 0), "02x")


def color_to_hex_string(color: Color) -> str:
    """``Color(r=1, g=1, b=1)`` -> ``"#ffffff"``."""

    return (
        "#"
        + _channel_to_byte_string(color.r)
        + _channel_to_byte_string(color.g)
        + _channel_to_byte_string(color.b)
    )


class HtmlOption(BaseModel):
    """Everything needed to serialize one page: head metadata plus the body tree."""

    page_name: str = Field(
        ...,
        alias="pageName",
        description="Page title used for the tab, bookmarks, search results and og:title.",
    )
    app_name: str = Field(..., alias="appName", description="Application or site name.")
    description: str = Field(..., description="Page description for search and link previews.")
    theme_color: Optional[Color] = Field(
        None, alias="themeColor", description="Browser UI accent colour."
    )
    icon_url: str = Field(..., alias="iconUrl", description="URL of the page icon.")
    manifest_url: Optional[str] = Field(
        None, alias="manifestUrl", description="URL of the web app manifest."
    )
    language: Optional[Language] = Field(None, description="Language of the page.")
    cover_image_url: str = Field(
        ..., alias="coverImageUrl", description="Cover image used by og:image."
    )
    url: str = Field(..., description="Canonical URL of the page.")
    twitter_card: TwitterCard = Field(
        "SummaryCard",
        alias="twitterCard",
        description="How the page is displayed when shared on Twitter.",
    )
    style: Optional[str] = Field(None, description="Inline CSS applied to the whole page.")
    style_url_list: List[str] = Field(
        default_factory=list, alias="styleUrlList", description="External stylesheet URLs."
    )
    script: Optional[str] = Field(None, description="Inline JavaScript in ES module form.")
    script_url_list: List[str] = Field(
        default_factory=list, alias="scriptUrlList", description="External script URLs."
    )
    body_class: Optional[str] = Field(None, alias="bodyClass", description="Class of <body>.")
    javascript_required: bool = Field(
        False,
        alias="javaScriptMustBeAvailable",
        description="Prepend a <noscript> notice to the body.",
    )
    children: Any = Field(
        default_factory=ElementList,
        description="Body children: a string, a list or keyed mapping of elements, or a children variant.",
    )

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> Children:
        try:
            children = to_children(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        if isinstance(children, ElementList):
            for key, child in children.items:
                if not isinstance(child, Element):
                    raise ValueError(f"child {key!r} is not an element: {child!r}")
        return children


__all__ = [
    "Color",
    "HtmlOption",
    "Language",
    "TwitterCard",
    "color_to_hex_string",
    "language_to_ietf_tag",
    "twitter_card_to_string",
]
