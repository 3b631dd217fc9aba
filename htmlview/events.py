"""Interaction bindings attached to elements, and pointer event normalization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Optional, TypeVar

logger = logging.getLogger(__name__)

Message = TypeVar("Message")

PointerType = Literal["mouse", "pen", "touch", "unknown"]

_KNOWN_POINTER_TYPES = ("mouse", "pen", "touch")


@dataclass(frozen=True)
class Pointer:
    """Pointer sample handed to pointer handlers."""

    x: float
    y: float
    width: float
    height: float
    is_primary: bool
    pointer_id: int
    pointer_type: PointerType
    pressure: float
    tangential_pressure: float
    tilt_x: float
    tilt_y: float
    twist: float


@dataclass(frozen=True)
class ClickMessageData(Generic[Message]):
    """Message sent on click.

    ``ignore_new_tab`` lets modified clicks (ctrl/meta/shift or a non-primary
    button) fall through to the browser and otherwise prevents the default
    navigation. ``stop_propagation`` keeps the click from reaching ancestors.
    """

    message: Message
    ignore_new_tab: bool = False
    stop_propagation: bool = False


@dataclass(frozen=True)
class Events(Generic[Message]):
    """Handlers bound to one element. Unset handlers mean "not bound"."""

    on_click: Optional[ClickMessageData[Message]] = None
    on_change: Optional[Message] = None
    on_input: Optional[Callable[[str], Message]] = None
    on_pointer_move: Optional[Callable[[Pointer], Message]] = None
    on_pointer_down: Optional[Callable[[Pointer], Message]] = None


def pointer_type_to_simple(pointer_type: str) -> PointerType:
    if pointer_type in _KNOWN_POINTER_TYPES:
        return pointer_type  # type: ignore[return-value]
    if pointer_type not in ("", "unknown"):
        logger.info("unrecognized pointer type %r, treating it as unknown", pointer_type)
    return "unknown"


def pointer_from_event(pointer_event: Any) -> Pointer:
    """Normalize a raw pointer event (anything exposing the DOM PointerEvent fields)."""

    return Pointer(
        x=pointer_event.client_x,
        y=pointer_event.client_y,
        width=pointer_event.width,
        height=pointer_event.height,
        is_primary=pointer_event.is_primary,
        pointer_id=pointer_event.pointer_id,
        pointer_type=pointer_type_to_simple(pointer_event.pointer_type),
        pressure=pointer_event.pressure,
        tangential_pressure=pointer_event.tangential_pressure,
        tilt_x=pointer_event.tilt_x,
        tilt_y=pointer_event.tilt_y,
        twist=pointer_event.twist,
    )


__all__ = [
    "ClickMessageData",
    "Events",
    "Message",
    "Pointer",
    "PointerType",
    "pointer_from_event",
    "pointer_type_to_simple",
]
