import math

import pytest

from ponggame.geometry import CircleShape, Rect, RectangleShape, TextShape, Vec2


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 0.5)
    assert (a + b) - b == a
    assert a * 2 == Vec2(3.0, -4.0)
    assert 2 * a == a * 2


def test_vec2_length_pythagorean():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_vec2_normalized_has_unit_length():
    v = Vec2(-7.0, 2.5).normalized()
    assert math.isclose(v.length(), 1.0)
    assert v.x < 0 and v.y > 0


def test_vec2_normalized_zero_stays_zero():
    assert Vec2().normalized() == Vec2()


def test_rect_edges():
    r = Rect(10.0, 20.0, 5.0, 8.0)
    assert r.right() == 10.0 + 5.0
    assert r.bottom() == 20.0 + 8.0


def test_rect_contains_excludes_far_edges():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert r.contains(Vec2(9.9, 9.9))
    assert not r.contains(Vec2(10.0, 5.0))
    assert not r.contains(Vec2(5.0, 10.0))
    assert not r.contains(Vec2(-0.1, 5.0))


def test_rect_contains_negative_size():
    r = Rect(10.0, 10.0, -10.0, -10.0)
    assert r.contains(Vec2(5.0, 5.0))


def test_rect_translated_keeps_size():
    r = Rect(1.0, 2.0, 3.0, 4.0).translated(Vec2(10.0, 20.0))
    assert r == Rect(11.0, 22.0, 3.0, 4.0)


def test_rectangle_bounds_without_outline():
    shape = RectangleShape(size=Vec2(30.0, 40.0))
    assert shape.local_bounds() == Rect(0.0, 0.0, 30.0, 40.0)


def test_rectangle_bounds_grow_with_outline():
    shape = RectangleShape(size=Vec2(30.0, 40.0), outline_thickness=5.0)
    bounds = shape.local_bounds()
    assert bounds.left == -5.0
    assert bounds.right() == 30.0 + 5.0
    assert bounds.bottom() == 40.0 + 5.0


def test_circle_bounds_cover_diameter():
    circle = CircleShape(radius=6.0, origin=Vec2(6.0, 6.0))
    bounds = circle.local_bounds()
    assert bounds.width == bounds.height == 2 * 6.0


def test_text_bounds_grow_with_length():
    short = TextShape("ab", character_size=24).local_bounds()
    long = TextShape("abcd", character_size=24).local_bounds()
    assert long.width == pytest.approx(2 * short.width)
    assert TextShape("").local_bounds() == Rect()