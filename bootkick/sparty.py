"""Sparty, who kicks products off the conveyor when his input goes high."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Optional

from bootkick.pins import Draggable, OutputPin, Point, State

BACK_IMAGE = "images/sparty-back.png"
BOOT_IMAGE = "images/sparty-boot.png"
FRONT_IMAGE = "images/sparty-front.png"

BOOT_PIVOT = (0.5, 0.55)
BOOT_MAX_ROTATION = 0.8
KICK_POINT = 0.35
BOOT_PERCENTAGE = 0.80
PRODUCT_KICK_POINT_X = 100.0
KICK_RATE = 1.8

DEFAULT_HEIGHT = 100.0
DEFAULT_KICK_DURATION = 10.0
DEFAULT_KICK_SPEED = 1.0

WIRE_PIN_OFFSET = 25
WIRE_UPWARD_POINT_Y = 320
WIRE_LEFTWARD_POINT_X = 80
WIRE_OFFSET_SPARTY = 70

FindAt = Callable[[float, float], Optional[Draggable]]

_PIN_PATTERN = re.compile(
    r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?),\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
)


@dataclass(eq=False)
class _InputPin:
    """Sparty's input terminal, driven by a connected output pin."""

    location: Point
    state: State = State.UNKNOWN
    source: Optional[OutputPin] = None


def _to_float(value: Optional[str], default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _parse_pin(text: str) -> Point:
    """Parse ``"x, y"``; anything unparseable gives ``(0, 0)``."""
    match = _PIN_PATTERN.match(text)
    if match is None:
        return (0, 0)
    return (int(float(match.group(1))), int(float(match.group(2))))


class Sparty:
    """Kicks the product at his boot whenever his input pin rises to one.

    ``find_at(x, y)`` returns the draggable thing at a game location, or
    None; it is how Sparty finds the product in front of his boot.
    ``image_aspect`` is the width-to-height ratio of his images.
    """

    def __init__(self, find_at: Optional[FindAt] = None, image_aspect: float = 1.0) -> None:
        self.find_at = find_at
        self.image_aspect = image_aspect
        self.x = 0.0
        self.y = 0.0
        self.height = DEFAULT_HEIGHT
        self.width = DEFAULT_HEIGHT * image_aspect
        self.kick_duration = DEFAULT_KICK_DURATION
        self.kick_speed = DEFAULT_KICK_SPEED
        self.pin_location: Point = (0, 0)
        self.kick_y = 0.0
        self.kicking = False
        self.kick_angle = 0.0
        self.direction = 1
        self.last_state: Optional[State] = None
        self.input_pin = _InputPin((0, 0))

    def set_location(self, x: float, y: float) -> None:
        """Place Sparty's centre at ``(x, y)``."""
        self.x = x
        self.y = y

    def load(self, element: ET.Element) -> None:
        """Read position, size, kick settings and pin from a ``<sparty>`` element."""
        self.set_location(_to_float(element.get("x"), 0.0), _to_float(element.get("y"), 0.0))
        self.height = _to_float(element.get("height", "100"), DEFAULT_HEIGHT)
        self.kick_duration = _to_float(element.get("kick-duration", "10"), DEFAULT_KICK_DURATION)
        self.kick_speed = _to_float(element.get("kick-speed", "1"), DEFAULT_KICK_SPEED)
        self.width = self.height * self.image_aspect
        self.pin_location = _parse_pin(element.get("pin", "0, 0"))
        self.kick_y = self.y - self.height / 2 + self.height * BOOT_PERCENTAGE
        self.input_pin = _InputPin(self.pin_location)

    def grab_product(self) -> Optional[Draggable]:
        """The thing in front of Sparty's boot, or None."""
        if self.find_at is None:
            return None
        detect_x = self.x - PRODUCT_KICK_POINT_X
        if detect_x < 0 or self.kick_y < 0:
            return None
        return self.find_at(detect_x, self.kick_y)

    def start_kick(self) -> None:
        """Begin the kick animation."""
        self.kicking = True
        self.kick_angle = 0.0

    def update(self, elapsed: float) -> None:
        """Start a kick on a rising input and advance any kick in progress."""
        state = self.input_pin.state
        if state is State.ONE and self.last_state is not State.ONE:
            self.start_kick()
        if self.kicking:
            self.update_kick_angle(elapsed)
        self.last_state = self.input_pin.state

    def update_kick_angle(self, elapsed: float) -> None:
        """Swing the boot and kick whatever is in front once it is far enough out."""
        self.kick_angle += elapsed * self.direction * KICK_RATE / self.kick_duration
        if self.kick_angle >= BOOT_MAX_ROTATION:
            self.direction = -1
            self.kick_angle = BOOT_MAX_ROTATION
        elif self.kick_angle <= 0:
            self.end_kick()

        if self.kick_angle >= KICK_POINT * BOOT_MAX_ROTATION * 2:
            target = self.grab_product()
            if target is not None and target.is_grabbable():
                target.kick(self.kick_speed)

    def end_kick(self) -> None:
        """Stop the kick animation and ready the boot for the next one."""
        self.kicking = False
        self.kick_angle = 0.0
        self.direction = 1

    @property
    def wire_color(self) -> tuple[int, int, int]:
        """RGB color of the wire into Sparty for the input's state."""
        if self.input_pin.state is State.ZERO:
            return (0, 0, 0)
        if self.input_pin.state is State.ONE:
            return (255, 0, 0)
        return (128, 128, 128)