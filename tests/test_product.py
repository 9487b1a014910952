import pytest

from bootkick.product import (
    DEFAULT_SIZE,
    Property,
    PropertyType,
    Product,
    move_products,
    place_products,
    reset_products,
)
from bootkick.score import Score


def test_default_size_is_eighty():
    assert Product().size == 80.0
    assert DEFAULT_SIZE == 80.0


@pytest.mark.parametrize(
    "name,kind",
    [
        ("red", PropertyType.COLOR),
        ("white", PropertyType.COLOR),
        ("square", PropertyType.SHAPE),
        ("diamond", PropertyType.SHAPE),
        ("izzo", PropertyType.CONTENT),
        ("none", PropertyType.CONTENT),
    ],
)
def test_property_types(name, kind):
    assert Property.from_name(name).type is kind


def test_unknown_property_name():
    assert Property.from_name("purple") is None


def test_content_images():
    assert Property.from_name("football").image == "football.png"
    assert Property.from_name("red").image is None


def test_load_attributes_order_and_kick():
    p = Product()
    p.load_attributes({"kick": "yes", "color": "green", "shape": "circle", "content": "smith"})
    assert p.should_kick is True
    assert p.properties == [Property.CIRCLE, Property.GREEN, Property.SMITH]


def test_load_attributes_skips_unknown_and_defaults():
    p = Product()
    p.load_attributes({"shape": "hexagon", "color": "blue"})
    assert p.should_kick is False
    assert p.properties == [Property.BLUE]


def test_first_of_and_colors():
    p = Product()
    p.add_property(Property.SQUARE)
    p.add_property(Property.RED)
    p.add_property(Property.BASKETBALL)
    assert p.first_of(PropertyType.COLOR) is Property.RED
    assert p.fill_color == (187, 0, 0)
    assert p.content_image == "basketball.png"


def test_content_none_has_no_image():
    p = Product()
    p.add_property(Property.NONE)
    assert p.content_image is None


def test_hit_test_bounds():
    p = Product()
    p.set_location(300, 200)
    half = p.size / 2
    assert p.hit_test(300, 200)
    assert p.hit_test(300 + half, 200 - half)
    assert not p.hit_test(300 + half + 1, 200)
    assert not p.hit_test(300, 200 - half - 1)


def test_kick_good_and_update_moves_left():
    score = Score(good_score=10, bad_score=-5)
    p = Product(score)
    p.should_kick = True
    p.set_location(100, 50)
    p.kick(20)
    assert score.level_score == 10
    assert p.was_kicked and p.score_updated
    p.update(0.5)
    assert p.x == 100 - 20 * 0.5
    assert p.y == 50


def test_kick_bad():
    score = Score(good_score=10, bad_score=-5)
    p = Product(score)
    p.kick(3)
    assert score.level_score == -5


def test_move_by_ignored_after_kick():
    p = Product()
    p.set_location(10, 10)
    p.move_by(5, 0)
    assert (p.x, p.y) == (15, 10)
    p.kick(7)
    p.move_by(5, 0)
    assert (p.x, p.y) == (15, 10)


def test_reset_restores_initial_state():
    p = Product()
    p.set_initial_position(40, 60)
    p.set_location(90, 90)
    p.kick(5)
    p.reset()
    assert (p.x, p.y) == (40, 60)
    assert p.was_kicked is False
    assert p.kick_speed == 0


def test_on_click_toggles_kick():
    p = Product()
    p.on_click(0, 0)
    assert p.should_kick is True
    p.on_click(0, 0)
    assert p.should_kick is False


def test_group_helpers():
    products = [Product(), Product()]
    place_products(products, 12, 34)
    assert all((p.x, p.y) == (12, 34) for p in products)
    products[1].kick(1)
    move_products(products, 0, 6)
    assert (products[0].x, products[0].y) == (12, 40)
    assert (products[1].x, products[1].y) == (12, 34)
    for p in products:
        p.set_initial_position(1, 2)
    reset_products(products)
    assert all((p.x, p.y, p.was_kicked) == (1, 2, False) for p in products)