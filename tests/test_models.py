import math
import unittest

from pydantic import ValidationError

from htmlview.dom_model import ElementList, Text
from htmlview.models import (
    Color,
    HtmlOption,
    color_to_hex_string,
    language_to_ietf_tag,
    twitter_card_to_string,
)


def _option(**overrides) -> HtmlOption:
    data = {
        "pageName": "Page",
        "appName": "App",
        "description": "Description",
        "iconUrl": "https://example.com/icon.png",
        "coverImageUrl": "https://example.com/cover.png",
        "url": "https://example.com/",
    }
    data.update(overrides)
    return HtmlOption.model_validate(data)


class ColorToHexTest(unittest.TestCase):
    def test_reference_vectors(self) -> None:
        self.assertEqual(color_to_hex_string(Color(r=1, g=1, b=1)), "#ffffff")
        self.assertEqual(color_to_hex_string(Color(r=0, g=0, b=0)), "#000000")
        self.assertEqual(color_to_hex_string(Color(r=1, g=0, b=0)), "#ff0000")
        self.assertEqual(color_to_hex_string(Color(r=0.5, g=0.2, b=0.1)), "#803319")

    def test_out_of_range_values_are_clamped(self) -> None:
        self.assertEqual(Color(r=-0.5, g=2, b=0.999).to_hex(), "#00ffff")

    def test_non_finite_channels_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Color(r=math.nan, g=0, b=0)
        with self.assertRaises(ValidationError):
            Color.model_validate({"r": 0, "g": float("inf"), "b": 0})
        with self.assertRaises(ValidationError):
            _option(themeColor={"r": 0, "g": 0, "b": float("-inf")})


class HtmlOptionTest(unittest.TestCase):
    def test_defaults(self) -> None:
        option = _option()
        self.assertEqual(option.twitter_card, "SummaryCard")
        self.assertEqual(option.children, ElementList(()))
        self.assertFalse(option.javascript_required)
        self.assertEqual(option.style_url_list, [])

    def test_children_string_is_coerced(self) -> None:
        self.assertEqual(_option(children="hi").children, Text("hi"))

    def test_children_must_be_elements(self) -> None:
        with self.assertRaises(ValidationError):
            _option(children=5)
        with self.assertRaises(ValidationError):
            _option(children=[1, 2])
        with self.assertRaises(ValidationError):
            _option(children={"a": "not an element"})

    def test_accepts_field_names(self) -> None:
        option = HtmlOption(
            page_name="P",
            app_name="A",
            description="D",
            icon_url="i",
            cover_image_url="c",
            url="u",
            theme_color=Color(r=0, g=0, b=1),
        )
        self.assertEqual(option.theme_color.to_hex(), "#0000ff")

    def test_language_and_card_mappings(self) -> None:
        self.assertEqual(language_to_ietf_tag("Japanese"), "ja")
        self.assertEqual(language_to_ietf_tag("English"), "en")
        self.assertEqual(language_to_ietf_tag("Esperanto"), "eo")
        self.assertEqual(twitter_card_to_string("SummaryCard"), "summary")
        self.assertEqual(
            twitter_card_to_string("SummaryCardWithLargeImage"), "summary_large_image"
        )


if __name__ == "__main__":
    unittest.main()
