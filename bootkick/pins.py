"""Pin states, the draggable interface and output pins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional

PIN_SIZE = 10
DEFAULT_LINE_LENGTH = 20
LINE_WIDTH = 3
BEZIER_MAX_OFFSET = 200.0

Point = tuple[int, int]


class State(Enum):
    """Logic level carried by a pin or wire."""

    ZERO = 0
    ONE = 1
    UNKNOWN = 2


class Draggable(ABC):
    """Something the player can grab and move in the game."""

    @abstractmethod
    def set_location(self, x: float, y: float) -> None:
        """Move the thing to ``(x, y)``."""

    @abstractmethod
    def is_grabbable(self) -> bool:
        """Whether the thing may be grabbed."""

    @abstractmethod
    def release(self) -> None:
        """Let go after dragging."""


class OutputPin(Draggable):
    """A pin that drives the state of the input pins wired to it.

    ``owner`` is any object with ``x`` and ``y``; the pin's ``location`` is
    relative to it. Dragging the pin draws a wire whose end is offered to
    ``on_release(pin, line_end)`` when the pin is let go. Connected inputs
    are objects with a ``state`` attribute and a ``source`` attribute.
    """

    def __init__(
        self,
        owner: Any = None,
        location: Point = (0, 0),
        on_release: Optional[Callable[["OutputPin", Point], Any]] = None,
    ) -> None:
        self.owner = owner
        self.location: Point = (int(location[0]), int(location[1]))
        self.on_release = on_release
        self.state = State.UNKNOWN
        self.line_end: Point = (0, 0)
        self.dragging = False
        self.line_length = DEFAULT_LINE_LENGTH
        self.connected: list[Any] = []

    def absolute_location(self) -> Point:
        """Location of the pin in game coordinates."""
        lx, ly = self.location
        if self.owner is None:
            return (lx, ly)
        x = self.owner.x + lx + self.line_length + PIN_SIZE // 2
        y = self.owner.y + ly
        return (int(x), int(y))

    def set_location(self, x: float, y: float) -> None:
        """Drag the wire end to ``(x, y)``."""
        self.dragging = True
        self.line_end = (int(x), int(y))

    def is_grabbable(self) -> bool:
        return True

    def hit_test(self, x: float, y: float) -> bool:
        """Whether ``(x, y)`` lies within the pin's grab radius."""
        px, py = self.absolute_location()
        return (px - x) ** 2 + (py - y) ** 2 < PIN_SIZE * PIN_SIZE

    def release(self) -> None:
        """Finish a drag, offering the wire end for connection."""
        if self.dragging and self.on_release is not None:
            self.on_release(self, self.line_end)
        self.dragging = False

    def connect(self, pin: Any) -> None:
        """Wire ``pin`` to this output; connecting twice has no effect."""
        if pin is None or any(p is pin for p in self.connected):
            return
        self.connected.append(pin)
        pin.source = self

    def disconnect(self, pin: Any) -> None:
        """Remove ``pin`` from this output's connections if present."""
        for i, p in enumerate(self.connected):
            if p is pin:
                del self.connected[i]
                return

    def update(self) -> None:
        """Push this pin's state to every connected input."""
        for pin in self.connected:
            pin.state = self.state