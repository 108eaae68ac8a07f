"""Edge-triggered input queue, frame scheduling and coordinate mapping."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from .config import CANVAS_HEIGHT, CANVAS_WIDTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TapEvent:
    """A single activate input. ``pos`` is in logical units, or None for keys."""

    pos: tuple[float, float] | None = None


def to_logical(
    pos: tuple[float, float],
    physical_size: tuple[int, int],
    logical_size: tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT),
) -> tuple[float, float]:
    """Map a point in window pixels into the fixed logical canvas."""
    px, py = pos
    pw, ph = physical_size
    lw, lh = logical_size
    return (px * lw / pw, py * lh / ph)


class InputQueue:
    """Taps pushed by the host and drained once per tick by the controller."""

    def __init__(self) -> None:
        self._events: deque[TapEvent] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def push(self, event: TapEvent) -> None:
        self._events.append(event)

    def drain(self) -> Iterator[TapEvent]:
        while self._events:
            yield self._events.popleft()

    def clear(self) -> None:
        self._events.clear()


class FrameScheduler:
    """Holds at most one pending frame callback.

    ``request`` while a frame is already pending is ignored, so a phase can never
    end up with two loops driving it.
    """

    def __init__(self) -> None:
        self._pending: Callable[[], bool] | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: Callable[[], bool]) -> bool:
        if self._pending is not None:
            logger.debug("Frame already pending; request dropped")
            return False
        self._pending = callback
        return True

    def run_pending(self) -> bool:
        """Run the pending callback once. Returns whether it asked for another frame."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        return bool(callback())
