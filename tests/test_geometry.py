import math
import random

import pytest

from mag_arena.geometry import Vec2, check_collision_circles, lerp, random_value


def test_length_of_three_four():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_length_sqr_matches_length():
    v = Vec2(3, 4)
    assert v.length_sqr() == pytest.approx(v.length() ** 2)


def test_normalize_has_unit_length():
    v = Vec2(-7.5, 12.25).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_stays_zero():
    assert Vec2(0, 0).normalize() == Vec2(0, 0)


def test_normalize_keeps_direction():
    v = Vec2(10, 0).normalize()
    assert v == Vec2(1.0, 0.0)


def test_distance_is_symmetric():
    a, b = Vec2(1, 2), Vec2(-4, 9)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(a) == 0


def test_dot_of_orthogonal_is_zero():
    assert Vec2(1, 0).dot(Vec2(0, 5)) == 0


def test_dot_with_itself_is_length_sqr():
    v = Vec2(2.5, -3.0)
    assert v.dot(v) == pytest.approx(v.length_sqr())


def test_operators_round_trip():
    a, b = Vec2(1.5, 2.0), Vec2(-3.0, 4.0)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert -a + a == Vec2(0, 0)


def test_circles_touching_collide():
    assert check_collision_circles(Vec2(0, 0), 5, Vec2(10, 0), 5)


def test_circles_apart_do_not_collide():
    assert not check_collision_circles(Vec2(0, 0), 4, Vec2(10, 0), 5)


def test_random_value_inclusive_range():
    rng = random.Random(1)
    values = {random_value(rng, 0, 3) for _ in range(500)}
    assert values == {0, 1, 2, 3}


def test_random_value_swapped_bounds():
    rng = random.Random(2)
    for _ in range(100):
        assert -5 <= random_value(rng, 5, -5) <= 5


def test_random_value_single_point():
    assert random_value(random.Random(3), 7, 7) == 7


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_lerp_is_between_endpoints():
    value = lerp(2.0, 8.0, 0.3)
    assert 2.0 < value < 8.0
    assert not math.isnan(value)