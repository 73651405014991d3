import pytest
from pydantic import ValidationError as PydanticValidationError

from geoservice.model.geo_point import GeoPoint, from_wire, is_within_bounds, to_wire


@pytest.mark.parametrize(
    "latitude, longitude",
    [
        (0.0, 0.0),
        (51.0308, 13.7301),
        (90.0, 180.0),
        (-90.0, -180.0),
        (90.0, -180.0),
        (-90.0, 180.0),
        (-33.8688, 151.2093),
    ],
)
def test_wire_conversion_is_inverse(latitude, longitude):
    assert from_wire(to_wire(latitude, longitude)) == (latitude, longitude)


def test_to_wire_puts_longitude_first():
    assert to_wire(51.0308, 13.7301) == [13.7301, 51.0308]


@pytest.mark.parametrize(
    "coordinates",
    [None, [], [13.7], [13.7, 51.0, 7.0], "13.7,51.0", ["13.7", "51.0"], [True, 51.0], {"lon": 1}],
)
def test_from_wire_returns_none_for_malformed_input(coordinates):
    assert from_wire(coordinates) is None


def test_named_accessors_follow_geojson_order():
    point = GeoPoint(coordinates=(13.7301, 51.0308))

    assert point.longitude == 13.7301
    assert point.latitude == 51.0308
    assert GeoPoint.of(51.0308, 13.7301) == point


def test_with_coordinates_replaces_both_and_keeps_original():
    point = GeoPoint.of(51.0, 13.0)

    moved = point.with_coordinates(52.5, 13.4)

    assert (moved.latitude, moved.longitude) == (52.5, 13.4)
    assert (point.latitude, point.longitude) == (51.0, 13.0)


def test_geo_point_is_immutable():
    point = GeoPoint.of(51.0, 13.0)

    with pytest.raises(PydanticValidationError):
        point.coordinates = (1.0, 2.0)


def test_geojson_round_trip():
    point = GeoPoint.of(52.516275, 13.377704)

    geojson = point.to_geojson()

    assert geojson == {"type": "Point", "coordinates": [13.377704, 52.516275]}
    assert GeoPoint.from_geojson(geojson) == point


def test_from_geojson_tolerates_missing_location():
    assert GeoPoint.from_geojson(None) is None
    assert GeoPoint.from_geojson({"type": "Point"}) is None


def test_bounds():
    assert is_within_bounds(90, 180)
    assert is_within_bounds(-90, -180)
    assert not is_within_bounds(90.0001, 0)
    assert not is_within_bounds(0, -180.5)
    assert not is_within_bounds(float("nan"), 0)
    assert not GeoPoint(coordinates=(200, 52.5)).is_within_bounds()


def test_rejects_non_point_type():
    with pytest.raises(PydanticValidationError):
        GeoPoint(type="Polygon", coordinates=(1.0, 2.0))
