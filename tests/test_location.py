import itertools

import pytest

from engine.errors import InvalidCoordinate
from engine.location import Location


@pytest.mark.parametrize("x, y", [(-1, 0), (19, 0), (0, 13), (0, -1), (100, 100)])
def test_out_of_range_coordinates_are_rejected(x, y):
    with pytest.raises(InvalidCoordinate):
        Location(x, y)


def test_invalid_coordinate_is_a_value_error():
    with pytest.raises(ValueError):
        Location(-5, 2)


def test_corners_are_valid():
    assert Location(0, 0) != Location(18, 12)
    assert Location(18, 12).x == 18


def test_value_equality_and_hashing():
    assert Location(3, 4) == Location(3, 4)
    assert len({Location(3, 4), Location(3, 4), Location(4, 3)}) == 2


def test_adjacency_is_symmetric():
    sample = [Location(x, y) for x in range(4) for y in range(4)]
    for a, b in itertools.product(sample, repeat=2):
        assert a.is_near(b) == b.is_near(a)


def test_adjacency_is_manhattan_distance_one():
    center = Location(5, 5)
    assert center.is_near(Location(5, 6))
    assert center.is_near(Location(4, 5))
    assert not center.is_near(Location(6, 6))
    assert not center.is_near(Location(5, 7))
    assert not center.is_near(center)


def test_coerce_accepts_pairs():
    assert Location.coerce((2, 3)) == Location(2, 3)
    loc = Location(1, 1)
    assert Location.coerce(loc) is loc


@pytest.mark.parametrize("value", [(19, 0), "ab", None, (1, 2, 3)])
def test_coerce_rejects_garbage(value):
    with pytest.raises(InvalidCoordinate):
        Location.coerce(value)

