"""Dispatch browser events to the messages bound at their element paths."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Optional

from .bridge import (
    BrowserEvent,
    ChangeEvent,
    ClickEvent,
    InputEvent,
    PointerDownEvent,
    PointerMoveEvent,
    parse_browser_event,
)
from .event_map import EventMap
from .events import Events, Message, pointer_from_event
from .path import ElementPath

logger = logging.getLogger(__name__)


class RenderState(Generic[Message]):
    """Holds the current path -> binding map and the single message sink.

    Raw events are duck typed on the DOM attribute names in snake case
    (``ctrl_key``, ``button``, ``prevent_default()``, ``target.value``,
    ``client_x`` ...); :mod:`htmlview.bridge` provides matching models.
    A path without a matching binding is ignored: paths go stale between
    renders and that is not an error.
    """

    def __init__(self, message_handler: Callable[[Message], None]) -> None:
        self.message_handler = message_handler
        self._message_data_map: EventMap = {}

    @property
    def message_data_map(self) -> EventMap:
        return self._message_data_map

    def set_message_data_map(self, message_data_map: EventMap) -> None:
        """Replace the whole mapping; called once per render."""

        self._message_data_map = dict(message_data_map)

    def _events_at(self, path: str) -> Optional[Events]:
        events = self._message_data_map.get(ElementPath(path))
        if events is None:
            logger.debug("no binding at path %r", path)
        return events

    def handle_click(self, path: str, mouse_event: Any) -> None:
        events = self._events_at(path)
        if events is None or events.on_click is None:
            return
        click = events.on_click
        if click.ignore_new_tab:
            # Modified or middle clicks open a new tab; leave them to the browser.
            if (
                mouse_event.ctrl_key
                or mouse_event.meta_key
                or mouse_event.shift_key
                or mouse_event.button != 0
            ):
                return
            mouse_event.prevent_default()
        if click.stop_propagation:
            mouse_event.stop_propagation()
        self.message_handler(click.message)

    def handle_change(self, path: str) -> None:
        events = self._events_at(path)
        if events is None or events.on_change is None:
            return
        self.message_handler(events.on_change)

    def handle_input(self, path: str, input_event: Any) -> None:
        events = self._events_at(path)
        if events is None or events.on_input is None:
            return
        self.message_handler(events.on_input(input_event.target.value))

    def handle_pointer_move(self, path: str, pointer_event: Any) -> None:
        events = self._events_at(path)
        if events is None or events.on_pointer_move is None:
            return
        self.message_handler(events.on_pointer_move(pointer_from_event(pointer_event)))

    def handle_pointer_down(self, path: str, pointer_event: Any) -> None:
        events = self._events_at(path)
        if events is None or events.on_pointer_down is None:
            return
        self.message_handler(events.on_pointer_down(pointer_from_event(pointer_event)))

    def dispatch(self, payload: Mapping[str, Any]) -> BrowserEvent:
        """Parse a bridge payload and route it; returns the parsed event.

        The host reads ``default_prevented``/``propagation_stopped`` off the
        returned click event to replay them on the real DOM event.
        """

        event = parse_browser_event(payload)
        if isinstance(event, ClickEvent):
            self.handle_click(event.path, event)
        elif isinstance(event, ChangeEvent):
            self.handle_change(event.path)
        elif isinstance(event, InputEvent):
            self.handle_input(event.path, event)
        elif isinstance(event, PointerMoveEvent):
            self.handle_pointer_move(event.path, event)
        elif isinstance(event, PointerDownEvent):
            self.handle_pointer_down(event.path, event)
        return event


__all__ = ["RenderState"]
