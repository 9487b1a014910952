"""Sensors that report the properties of products passing under them."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Optional

from bootkick.pins import OutputPin, Point, State
from bootkick.product import COLORS, Product, Property

PANEL_OFFSET_Y = 87.0
PROPERTY_WIDTH = 100
PROPERTY_HEIGHT = 40
PANEL_BACKGROUND_COLOR = (128, 128, 128)
OUTPUT_PIN_OFFSET = 1

SENSOR_RANGE_Y = (-40, 15)
SENSOR_RANGE_X = (-10, 110)

CAMERA_IMAGE = "images/sensor-camera.png"
CABLE_IMAGE = "images/sensor-cable.png"

ReleaseHandler = Callable[[OutputPin, Point], Any]


@dataclass(frozen=True)
class _Origin:
    """Anchor at the game origin; panel pins carry absolute coordinates."""

    x: float = 0.0
    y: float = 0.0


_ORIGIN = _Origin()


def _detectable(name: str) -> Optional[Property]:
    """The property a panel called ``name`` watches for, or None."""
    prop = Property.from_name(name)
    return None if prop is Property.NONE else prop


class SensorPanel:
    """One property box of a sensor, with an output pin reporting detection."""

    width = PROPERTY_WIDTH
    height = PROPERTY_HEIGHT

    def __init__(
        self,
        prop: str,
        x: float,
        y: float,
        on_release: Optional[ReleaseHandler] = None,
    ) -> None:
        self.property = prop
        self.x = x
        self.y = y
        pin_location = (int(x + PROPERTY_WIDTH // 2 + OUTPUT_PIN_OFFSET), int(y))
        self.output_pin = OutputPin(_ORIGIN, pin_location, on_release)

    def set_location(self, x: float, y: float) -> None:
        """Move the panel centre to ``(x, y)``."""
        self.x = x
        self.y = y

    @property
    def color(self) -> Optional[tuple[int, int, int]]:
        """Fill color for a color property, or None for other properties."""
        prop = Property.from_name(self.property)
        return COLORS.get(prop) if prop is not None else None

    @property
    def image(self) -> Optional[str]:
        """Image path drawn for properties that are neither colors nor shapes."""
        if self.color is not None or self.property in ("square", "circle"):
            return None
        return f"images/{self.property}.png"

    def update_state(self, detected: Iterable[Property]) -> None:
        """Drive the pin high when this panel's property is among ``detected``."""
        prop = _detectable(self.property)
        if prop is not None:
            self.output_pin.state = State.ONE if prop in set(detected) else State.ZERO
        self.output_pin.update()


class Sensor:
    """A camera over the conveyor with one output panel per watched property.

    ``cable_width`` is the width of the cable image; the panels sit to the
    right of its centre line.
    """

    def __init__(
        self,
        cable_width: int = 0,
        on_release: Optional[ReleaseHandler] = None,
    ) -> None:
        self.x = 0.0
        self.y = 0.0
        self.cable_width = cable_width
        self.on_release = on_release
        self.properties: list[str] = []
        self.panels: list[SensorPanel] = []

    def set_location(self, x: float, y: float) -> None:
        """Place the sensor at ``(x, y)``."""
        self.x = x
        self.y = y

    def load(self, element: ET.Element) -> None:
        """Read position and watched properties from a level ``<sensor>`` element."""
        self.set_location(float(element.get("x", "0")), float(element.get("y", "0")))
        self.properties.extend(child.tag for child in element)

        left_x = self.x + self.cable_width // 2
        top_y = self.y + PANEL_OFFSET_Y
        self.panels = [
            SensorPanel(
                name,
                left_x + PROPERTY_WIDTH // 2,
                top_y + i * PROPERTY_HEIGHT + PROPERTY_HEIGHT // 2,
                self.on_release,
            )
            for i, name in enumerate(self.properties)
        ]

    def is_product_in_range(self, product: Product) -> bool:
        """Whether ``product`` lies inside the sensor's viewing window."""
        half = product.size / 2
        top, bottom = product.y - half, product.y + half
        left, right = product.x - half, product.x + half
        return (
            bottom >= self.y + SENSOR_RANGE_Y[0]
            and top <= self.y + SENSOR_RANGE_Y[1]
            and left >= self.x + SENSOR_RANGE_X[0]
            and right <= self.x + SENSOR_RANGE_X[1]
        )

    def detect(self, products: Iterable[Product]) -> list[Property]:
        """Properties of every product in range, in product order."""
        return [
            prop
            for product in products
            if self.is_product_in_range(product)
            for prop in product.properties
        ]

    def update_pins(self, detected: Iterable[Property]) -> None:
        """Set every panel's pin from the ``detected`` properties."""
        detected = list(detected)
        for panel in self.panels:
            panel.update_state(detected)

    def update(self, products: Iterable[Product]) -> None:
        """Look for products in range and drive the panel pins accordingly."""
        self.update_pins(self.detect(products))

    def hit_draggable(self, x: float, y: float) -> Optional[OutputPin]:
        """The panel output pin at ``(x, y)``, or None."""
        for panel in self.panels:
            if panel.output_pin.hit_test(x, y):
                return panel.output_pin
        return None