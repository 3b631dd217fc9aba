import logging

import pytest
from pydantic import ValidationError

from htmlview.bridge import (
    ChangeEvent,
    ClickEvent,
    InputEvent,
    PointerDownEvent,
    PointerMoveEvent,
    parse_browser_event,
    parse_browser_event_json,
)
from htmlview.events import pointer_from_event, pointer_type_to_simple


def test_parse_discriminates_on_type() -> None:
    assert isinstance(parse_browser_event({"type": "click", "path": "/a"}), ClickEvent)
    assert isinstance(parse_browser_event({"type": "change", "path": "/a"}), ChangeEvent)
    assert isinstance(parse_browser_event({"type": "input", "path": "/a"}), InputEvent)
    assert isinstance(
        parse_browser_event({"type": "pointermove", "path": "/a", "clientX": 0, "clientY": 0}),
        PointerMoveEvent,
    )
    assert isinstance(
        parse_browser_event_json('{"type": "pointerdown", "path": "/a", "clientX": 0, "clientY": 0}'),
        PointerDownEvent,
    )


def test_parse_rejects_unknown_type_and_missing_fields() -> None:
    with pytest.raises(ValidationError):
        parse_browser_event({"type": "keydown", "path": "/a"})
    with pytest.raises(ValidationError):
        parse_browser_event({"type": "pointermove", "path": "/a"})
    with pytest.raises(ValidationError):
        parse_browser_event({"type": "click"})


def test_click_event_records_calls() -> None:
    click = parse_browser_event({"type": "click", "path": "/a", "button": 2, "metaKey": True})
    assert (click.button, click.meta_key, click.ctrl_key) == (2, True, False)

    click.prevent_default()
    click.stop_propagation()

    assert click.default_prevented and click.propagation_stopped


def test_input_event_exposes_target_value() -> None:
    event = parse_browser_event({"type": "input", "path": "/a", "target": {"value": "こんにちは"}})
    assert event.target.value == "こんにちは"


def test_pointer_from_bridge_event() -> None:
    event = parse_browser_event(
        {
            "type": "pointermove",
            "path": "/canvas",
            "clientX": 3.5,
            "clientY": 4,
            "width": 2,
            "height": 3,
            "isPrimary": False,
            "pointerId": 7,
            "pointerType": "touch",
            "pressure": 0.25,
            "tangentialPressure": 0.1,
            "tiltX": 10,
            "tiltY": -5,
            "twist": 90,
        }
    )

    pointer = pointer_from_event(event)

    assert pointer.x == 3.5
    assert pointer.y == 4
    assert (pointer.width, pointer.height) == (2, 3)
    assert pointer.is_primary is False
    assert pointer.pointer_id == 7
    assert pointer.pointer_type == "touch"
    assert (pointer.pressure, pointer.tangential_pressure) == (0.25, 0.1)
    assert (pointer.tilt_x, pointer.tilt_y, pointer.twist) == (10, -5, 90)


@pytest.mark.parametrize("raw", ["mouse", "pen", "touch"])
def test_known_pointer_types_pass_through(raw: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="htmlview.events"):
        assert pointer_type_to_simple(raw) == raw
    assert caplog.records == []


def test_empty_pointer_type_is_unknown_without_notice(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="htmlview.events"):
        assert pointer_type_to_simple("") == "unknown"
    assert caplog.records == []


def test_unrecognized_pointer_type_logs_notice(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="htmlview.events"):
        assert pointer_type_to_simple("eye-tracker") == "unknown"

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.INFO
    assert "eye-tracker" in caplog.records[0].getMessage()
