import pytest

from geoservice.model.validation import (
    parse_resource,
    validate_resource,
    validate_search_params,
    wants_details,
)

from fakes import make_resource, poi_body


@pytest.mark.parametrize("expand, expected", [
    ("details", True),
    ("DETAILS", True),
    ("Details", True),
    (None, False),
    ("", False),
    ("detail", False),
    ("all", False),
])
def test_wants_details(expand, expected):
    assert wants_details(expand) is expected


def test_valid_resource_has_no_violations():
    assert validate_resource(make_resource()) == []


def test_missing_fields_are_all_reported():
    resource, violations = parse_resource({})

    messages = [v.message for v in validate_resource(resource)]

    assert violations == []
    assert "category must not be empty" in messages
    assert "name must not be empty" in messages
    assert "location must not be null" in messages


def test_out_of_range_location():
    resource, _ = parse_resource(poi_body(latitude=52.5, longitude=200))

    violations = validate_resource(resource)

    assert len(violations) == 1
    assert "location" in violations[0].message
    assert violations[0].value == [200.0, 52.5]


def test_type_errors_become_violations():
    body = poi_body()
    body["name"] = 5
    body["location"]["coordinates"] = [1.0, 2.0, 3.0]

    resource, violations = parse_resource(body)

    assert resource is None
    fields = [v.message.split(":")[0] for v in violations]
    assert "name" in fields
    assert any(f.startswith("location.coordinates") for f in fields)


@pytest.mark.parametrize("body", [None, [], "poi", 3])
def test_body_must_be_an_object(body):
    resource, violations = parse_resource(body)

    assert resource is None
    assert violations[0].message == "request body must be a JSON object"


def test_search_params_parsed():
    params, violations = validate_search_params(
        {"lat": "52.516275", "lon": "13.377704", "radius": "1000", "expand": "Details"}
    )

    assert violations == []
    assert params.latitude == 52.516275
    assert params.longitude == 13.377704
    assert params.radius == 1000
    assert params.expand_details is True


@pytest.mark.parametrize("args, message", [
    ({"lat": "91", "lon": "0", "radius": "10"}, "latitude must be between -90 and 90"),
    ({"lat": "0", "lon": "-180.1", "radius": "10"}, "longitude must be between -180 and 180"),
    ({"lat": "0", "lon": "0", "radius": "0"}, "radius must be between 1 and 100000"),
    ({"lat": "0", "lon": "0", "radius": "100001"}, "radius must be between 1 and 100000"),
    ({"lon": "0", "radius": "10"}, "lat is required"),
    ({"lat": "x", "lon": "0", "radius": "10"}, "lat must be a number"),
    ({"lat": "0", "lon": "0", "radius": "1.5"}, "radius must be an integer"),
])
def test_search_param_violations(args, message):
    params, violations = validate_search_params(args)

    assert params is None
    assert message in [v.message for v in violations]


def test_search_param_bounds_are_inclusive():
    params, violations = validate_search_params({"lat": "-90", "lon": "180", "radius": "100000"})

    assert violations == []
    assert params.expand_details is False


def test_nan_is_rejected_and_reported_as_text():
    _, violations = validate_search_params({"lat": "nan", "lon": "0", "radius": "10"})

    assert violations[0].value == "nan"


@pytest.mark.parametrize("coordinate", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_coordinates_are_rejected_as_text(coordinate):
    body = poi_body()
    body["location"]["coordinates"] = [coordinate, 52.5]

    resource, violations = parse_resource(body)

    assert resource is None
    assert violations[0].message.startswith("location.coordinates")
    assert violations[0].value == str(coordinate)
