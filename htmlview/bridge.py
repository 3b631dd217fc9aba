"""Pydantic models for raw browser events posted back by the host page.

A host script listens for DOM events, finds the path of the bound element and
posts a JSON payload such as::

    {"type": "click", "path": "/main/save", "ctrlKey": false, "button": 0}

The models expose the same attribute names the dispatcher reads from any
raw event, so they can be handed to :class:`~htmlview.render_state.RenderState`
directly.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _BrowserEventBase(BaseModel):
    path: str = Field(..., description="Path of the element the listener was attached to.")

    model_config = ConfigDict(populate_by_name=True)


class ClickEvent(_BrowserEventBase):
    """A ``click`` MouseEvent."""

    type: Literal["click"] = "click"
    ctrl_key: bool = Field(False, alias="ctrlKey")
    meta_key: bool = Field(False, alias="metaKey")
    shift_key: bool = Field(False, alias="shiftKey")
    button: int = Field(0, description="0 is the main button, usually the left one.")
    default_prevented: bool = Field(False, alias="defaultPrevented")
    propagation_stopped: bool = Field(False, alias="propagationStopped")

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class ChangeEvent(_BrowserEventBase):
    type: Literal["change"] = "change"


class InputTarget(BaseModel):
    """The ``<input>`` or ``<textarea>`` that fired the event."""

    value: str = ""


class InputEvent(_BrowserEventBase):
    type: Literal["input"] = "input"
    target: InputTarget = Field(default_factory=InputTarget)


class _PointerEventBase(_BrowserEventBase):
    client_x: float = Field(..., alias="clientX")
    client_y: float = Field(..., alias="clientY")
    width: float = 1
    height: float = 1
    is_primary: bool = Field(True, alias="isPrimary")
    pointer_id: int = Field(0, alias="pointerId")
    pointer_type: str = Field("", alias="pointerType")
    pressure: float = 0
    tangential_pressure: float = Field(0, alias="tangentialPressure")
    tilt_x: float = Field(0, alias="tiltX")
    tilt_y: float = Field(0, alias="tiltY")
    twist: float = 0


class PointerMoveEvent(_PointerEventBase):
    type: Literal["pointermove"] = "pointermove"


class PointerDownEvent(_PointerEventBase):
    type: Literal["pointerdown"] = "pointerdown"


BrowserEvent = Annotated[
    Union[ClickEvent, ChangeEvent, InputEvent, PointerMoveEvent, PointerDownEvent],
    Field(discriminator="type"),
]

_browser_event_adapter: TypeAdapter[Any] = TypeAdapter(BrowserEvent)


def parse_browser_event(payload: Mapping[str, Any]) -> BrowserEvent:
    """Validate a decoded payload. Raises ``pydantic.ValidationError`` on bad input."""

    return _browser_event_adapter.validate_python(payload)


def parse_browser_event_json(text: str) -> BrowserEvent:
    return _browser_event_adapter.validate_json(text)


__all__ = [
    "BrowserEvent",
    "ChangeEvent",
    "ClickEvent",
    "InputEvent",
    "InputTarget",
    "PointerDownEvent",
    "PointerMoveEvent",
    "parse_browser_event",
    "parse_browser_event_json",
]
