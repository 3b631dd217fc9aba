"""Interactive pages: render a view, keep its event map, and run the update loop."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Generic, Optional, TypeVar

from .event_map import build_event_map
from .events import Message
from .models import HtmlOption
from .render_state import RenderState
from .serialize import to_string

logger = logging.getLogger(__name__)

State = TypeVar("State")


def render_view(option: HtmlOption, render_state: Optional[RenderState] = None) -> str:
    """Serialize an interactive page.

    The body always starts with the ``<noscript>`` notice. When a render state
    is given it receives the event map of ``option.children``.
    """

    if not option.javascript_required:
        option = option.model_copy(update={"javascript_required": True})
    if render_state is not None:
        render_state.set_message_data_map(build_event_map(option.children))
    return to_string(option)


class App(Generic[State, Message]):
    """Minimal update loop: ``view(state)`` renders, messages go through ``update``.

    Messages from the render state are queued, never applied re-entrantly;
    :meth:`process_messages` drains the queue and renders once afterwards.
    """

    def __init__(
        self,
        init: State,
        update: Callable[[Message, State], State],
        view: Callable[[State], HtmlOption],
    ) -> None:
        self.state = init
        self._update = update
        self._view = view
        self._queue: Deque[Message] = deque()
        self.render_state: RenderState[Message] = RenderState(self._queue.append)
        self.html = self.render()

    def render(self) -> str:
        self.html = render_view(self._view(self.state), self.render_state)
        return self.html

    @property
    def pending(self) -> int:
        return len(self._queue)

    def process_messages(self) -> int:
        """Apply queued messages in arrival order; returns how many were applied."""

        applied = 0
        while self._queue:
            message = self._queue.popleft()
            self.state = self._update(message, self.state)
            applied += 1
        if applied:
            logger.debug("applied %d message(s), re-rendering", applied)
            self.render()
        return applied


__all__ = ["App", "render_view"]
