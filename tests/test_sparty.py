import xml.etree.ElementTree as ET

import pytest

from bootkick.pins import State
from bootkick.product import Product
from bootkick.score import Score
from bootkick.sparty import BOOT_MAX_ROTATION, PRODUCT_KICK_POINT_X, Sparty


def _element(**attrs):
    return ET.Element("sparty", {k.replace("_", "-"): v for k, v in attrs.items()})


def test_load_defaults():
    sparty = Sparty()
    sparty.load(_element(x="300", y="400"))
    assert sparty.height == 100.0
    assert sparty.kick_duration == 10.0
    assert sparty.kick_speed == 1.0
    assert sparty.pin_location == (0, 0)
    assert sparty.input_pin.state is State.UNKNOWN


def test_load_attributes_and_pin():
    sparty = Sparty(image_aspect=0.5)
    sparty.load(_element(x="300", y="400", height="200", kick_duration="0.5",
                         kick_speed="1000", pin="12.7, 34"))
    assert sparty.height == 200.0
    assert sparty.width == pytest.approx(sparty.height * 0.5)
    assert sparty.kick_duration == 0.5
    assert sparty.kick_speed == 1000.0
    assert sparty.pin_location == (12, 34)
    assert sparty.input_pin.location == (12, 34)


def test_bad_pin_falls_back_to_origin():
    sparty = Sparty()
    sparty.load(_element(pin="nonsense"))
    assert sparty.pin_location == (0, 0)


def test_kick_y_is_below_centre_and_within_height():
    sparty = Sparty()
    sparty.load(_element(x="300", y="400", height="100"))
    assert sparty.y < sparty.kick_y <= sparty.y + sparty.height / 2


def test_grab_product_queries_in_front_of_boot():
    calls = []

    def find_at(x, y):
        calls.append((x, y))
        return None

    sparty = Sparty(find_at)
    sparty.load(_element(x="300", y="400"))
    assert sparty.grab_product() is None
    assert calls == [(sparty.x - PRODUCT_KICK_POINT_X, sparty.kick_y)]


def test_grab_product_off_screen_skips_lookup():
    calls = []
    sparty = Sparty(lambda x, y: calls.append((x, y)))
    sparty.load(_element(x="50", y="400"))
    assert sparty.grab_product() is None
    assert calls == []


def test_rising_edge_starts_kick_and_kicks_product():
    score = Score(good_score=10)
    product = Product(score)
    product.should_kick = True
    sparty = Sparty(lambda x, y: product)
    sparty.load(_element(x="300", y="400", kick_duration="1", kick_speed="500"))

    sparty.update(0.01)
    assert not sparty.kicking

    sparty.input_pin.state = State.ONE
    sparty.update(0.01)
    assert sparty.kicking
    assert not product.was_kicked

    sparty.update(0.5)
    assert sparty.kick_angle == BOOT_MAX_ROTATION
    assert sparty.direction == -1
    assert product.was_kicked
    assert product.kick_speed == 500.0
    assert score.level_score >= 10


def test_kick_ends_after_swing_back():
    sparty = Sparty()
    sparty.load(_element(x="300", y="400", kick_duration="1"))
    sparty.input_pin.state = State.ONE
    sparty.update(0.5)
    sparty.update(1.0)
    assert not sparty.kicking
    assert sparty.kick_angle == 0.0
    assert sparty.direction == 1


def test_held_input_does_not_restart_kick():
    sparty = Sparty()
    sparty.load(_element(kick_duration="1"))
    sparty.input_pin.state = State.ONE
    sparty.update(0.5)
    sparty.update(1.0)
    assert not sparty.kicking
    sparty.update(0.1)
    assert not sparty.kicking


def test_end_kick_resets():
    sparty = Sparty()
    sparty.start_kick()
    sparty.kick_angle = 0.3
    sparty.direction = -1
    sparty.end_kick()
    assert (sparty.kicking, sparty.kick_angle, sparty.direction) == (False, 0.0, 1)


def test_wire_color_follows_input():
    sparty = Sparty()
    sparty.input_pin.state = State.ONE
    assert sparty.wire_color == (255, 0, 0)
    sparty.input_pin.state = State.ZERO
    assert sparty.wire_color == (0, 0, 0)
    sparty.input_pin.state = State.UNKNOWN
    assert sparty.wire_color == (128, 128, 128)