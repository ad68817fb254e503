import pytest

from geodistance.models import Coordinate, BoundingBox, parse_coordinate


@pytest.fixture
def box():
    return BoundingBox(Coordinate(40.0, -75.0), Coordinate(41.0, -74.0))


def test_coordinate_is_an_immutable_value():
    point = Coordinate(40.7128, -74.0060)
    assert point == Coordinate(40.7128, -74.0060)
    assert hash(point) == hash(Coordinate(40.7128, -74.0060))
    lat, lon = point
    assert (lat, lon) == (40.7128, -74.0060)
    with pytest.raises(AttributeError):
        point.latitude = 0.0


def test_bounding_box_corner_accessors(box):
    assert box.min_latitude == 40.0
    assert box.max_latitude == 41.0
    assert box.min_longitude == -75.0
    assert box.max_longitude == -74.0


def test_contains_is_inclusive(box):
    assert box.contains(Coordinate(40.5, -74.5))
    assert box.contains(Coordinate(40.0, -75.0))
    assert box.contains(Coordinate(41.0, -74.0))
    assert not box.contains(Coordinate(41.01, -74.5))
    assert not box.contains(Coordinate(40.5, -73.99))


def test_to_extent(box):
    assert box.to_extent() == "40.0,-75.0,41.0,-74.0"


def test_to_dict(box):
    assert box.to_dict() == {
        "min": {"latitude": 40.0, "longitude": -75.0},
        "max": {"latitude": 41.0, "longitude": -74.0},
    }


def test_parse_coordinate():
    assert parse_coordinate(" 34.0522 , -118.2437 ") == Coordinate(34.0522, -118.2437)


@pytest.mark.parametrize("text", ["", "40.7", "1, 2, 3", "north, west"])
def test_parse_coordinate_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_coordinate(text)
