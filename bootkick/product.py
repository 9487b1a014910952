"""Products that ride the conveyor, and helpers that act on many of them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Optional

from bootkick.pins import Draggable
from bootkick.score import Score

DEFAULT_SIZE = 80.0
CONTENT_SCALE = 0.8
LAST_PRODUCT_DELAY = 3.0


class PropertyType(Enum):
    """The kind of trait a product property describes."""

    COLOR = "color"
    SHAPE = "shape"
    CONTENT = "content"


class Property(Enum):
    """A trait a product can carry, named as in level files."""

    NONE = "none"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    SQUARE = "square"
    CIRCLE = "circle"
    DIAMOND = "diamond"
    IZZO = "izzo"
    SMITH = "smith"
    FOOTBALL = "football"
    BASKETBALL = "basketball"

    @property
    def type(self) -> PropertyType:
        """Whether this property is a color, a shape or a content."""
        return PROPERTY_TYPES[self]

    @property
    def image(self) -> Optional[str]:
        """File name of the content image, or None for non-image properties."""
        return CONTENT_IMAGES.get(self)

    @classmethod
    def from_name(cls, name: str) -> Optional["Property"]:
        """The property called ``name``, or None if there is none."""
        return NAMES_TO_PROPERTIES.get(name)


NAMES_TO_PROPERTIES: dict[str, Property] = {prop.value: prop for prop in Property}

PROPERTY_TYPES: dict[Property, PropertyType] = {
    Property.RED: PropertyType.COLOR,
    Property.GREEN: PropertyType.COLOR,
    Property.BLUE: PropertyType.COLOR,
    Property.WHITE: PropertyType.COLOR,
    Property.SQUARE: PropertyType.SHAPE,
    Property.CIRCLE: PropertyType.SHAPE,
    Property.DIAMOND: PropertyType.SHAPE,
    Property.IZZO: PropertyType.CONTENT,
    Property.SMITH: PropertyType.CONTENT,
    Property.FOOTBALL: PropertyType.CONTENT,
    Property.BASKETBALL: PropertyType.CONTENT,
    Property.NONE: PropertyType.CONTENT,
}

CONTENT_IMAGES: dict[Property, str] = {
    Property.IZZO: "izzo.png",
    Property.SMITH: "smith.png",
    Property.FOOTBALL: "football.png",
    Property.BASKETBALL: "basketball.png",
}

COLORS: dict[Property, tuple[int, int, int]] = {
    Property.RED: (187, 0, 0),
    Property.GREEN: (24, 69, 59),
    Property.BLUE: (0, 39, 76),
    Property.WHITE: (255, 255, 255),
}


class Product(Draggable):
    """A product on the conveyor that Sparty may have to kick off.

    ``should_kick`` says whether kicking it is correct. When kicked, the
    product moves left at the kick speed and, if ``score`` is set, credits
    or charges the level score.
    """

    def __init__(self, score: Optional[Score] = None, size: float = DEFAULT_SIZE) -> None:
        self.score = score
        self.size = size
        self.x = 0.0
        self.y = 0.0
        self.initial_x = 0.0
        self.initial_y = 0.0
        self.should_kick = False
        self.was_kicked = False
        self.kick_speed = 0.0
        self.score_updated = False
        self.properties: list[Property] = []

    def load_attributes(self, attributes: Mapping[str, str]) -> None:
        """Read ``kick``, ``shape``, ``color`` and ``content`` from level attributes."""
        self.should_kick = attributes.get("kick", "no") == "yes"
        for key in ("shape", "color", "content"):
            prop = Property.from_name(attributes.get(key, ""))
            if prop is not None:
                self.properties.append(prop)

    def add_property(self, prop: Property) -> None:
        """Give the product another property."""
        self.properties.append(prop)

    def first_of(self, kind: PropertyType) -> Optional[Property]:
        """The first property of ``kind`` the product has, or None."""
        return next((p for p in self.properties if p.type is kind), None)

    @property
    def fill_color(self) -> tuple[int, int, int]:
        """RGB fill used to draw the product; white when no color is set."""
        color = self.first_of(PropertyType.COLOR)
        return COLORS.get(color, COLORS[Property.WHITE]) if color else COLORS[Property.WHITE]

    @property
    def content_image(self) -> Optional[str]:
        """Image file of the first real content property, or None."""
        for prop in self.properties:
            if prop.type is PropertyType.CONTENT and prop is not Property.NONE:
                return prop.image
        return None

    def set_location(self, x: float, y: float) -> None:
        """Place the product centre at ``(x, y)``."""
        self.x = x
        self.y = y

    def set_initial_position(self, x: float, y: float) -> None:
        """Remember ``(x, y)`` as where ``reset`` puts the product."""
        self.initial_x = x
        self.initial_y = y

    def move_by(self, dx: float, dy: float) -> None:
        """Shift the product, unless it is flying off after a kick."""
        if self.kick_speed == 0:
            self.set_location(self.x + dx, self.y + dy)

    def hit_test(self, x: float, y: float) -> bool:
        """Whether ``(x, y)`` lies within the product's square."""
        half = DEFAULT_SIZE / 2
        return abs(x - self.x) <= half and abs(y - self.y) <= half

    def update(self, elapsed: float) -> None:
        """Move left at the kick speed for ``elapsed`` seconds."""
        self.set_location(self.x - self.kick_speed * elapsed, self.y)

    def reset(self) -> None:
        """Return to the initial position, unkicked."""
        self.set_location(self.initial_x, self.initial_y)
        self.was_kicked = False
        self.kick_speed = 0.0

    def on_click(self, x: float, y: float) -> None:
        """Toggle whether the product should be kicked."""
        self.should_kick = not self.should_kick

    def is_grabbable(self) -> bool:
        return True

    def release(self) -> None:
        """Products need nothing done when let go."""

    def kick(self, speed: float) -> None:
        """Boot the product off the conveyor at ``speed`` and score the kick."""
        self.kick_speed = speed
        self.was_kicked = True
        if self.score is not None:
            if self.should_kick:
                self.score.add_good()
            else:
                self.score.add_bad()
        self.score_updated = True


def reset_products(products: Iterable[Product]) -> None:
    """Reset every product to its initial state."""
    for product in products:
        product.reset()


def move_products(products: Iterable[Product], dx: float, dy: float) -> None:
    """Shift every product that has not been kicked by ``(dx, dy)``."""
    for product in products:
        product.move_by(dx, dy)


def place_products(products: Iterable[Product], x: float, y: float) -> None:
    """Put every product at ``(x, y)``."""
    for product in products:
        product.set_location(x, y)