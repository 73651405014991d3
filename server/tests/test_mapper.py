import pytest
from bson import ObjectId

from geoservice.common.exceptions import InvalidIdentifierError, ValidationError
from geoservice.model.geo_point import GeoPoint
from geoservice.model.mongo.poi import PointOfInterestRecord
from geoservice.model.resource import PointOfInterestResource
from geoservice.service.mapper import (
    record_to_resource,
    resolve_object_id,
    resource_to_record,
    to_object_id,
)

from fakes import make_resource

OID = "5f1d7f4b2c1e4a3b9c8d7e6f"


@pytest.mark.parametrize(
    "resource",
    [
        make_resource(),
        make_resource(details="Fritz-Foerster-Platz 2, 01069 Dresden"),
        make_resource(category="  padded  ", name="Ümlaut ß", details=""),
        make_resource(latitude=-90.0, longitude=180.0),
    ],
)
def test_round_trip_preserves_fields(resource):
    result = record_to_resource(resource_to_record(resource))

    assert result.category == resource.category
    assert result.name == resource.name
    assert result.details == resource.details
    assert result.location == resource.location


def test_absent_details_stay_absent():
    record = PointOfInterestRecord(category="company", name="ZEISS", location=GeoPoint.of(51.05, 13.73))

    resource = record_to_resource(record)

    assert resource.details is None
    assert "details" not in resource.to_json()


def test_record_to_resource_stringifies_id():
    oid = ObjectId(OID)
    record = PointOfInterestRecord(id=oid, category="c", name="n", location=GeoPoint.of(1, 2))

    assert record_to_resource(record).id == OID


def test_explicit_id_wins_over_href():
    resource = make_resource(id=OID, href="http://localhost/poi/000000000000000000000000")

    assert resource_to_record(resource).id == ObjectId(OID)


def test_id_from_href_trailing_segment():
    resource = make_resource(href=f"http://localhost:5000/poi/{OID}")

    assert resource_to_record(resource).id == ObjectId(OID)


def test_no_identity_means_new_record():
    assert resource_to_record(make_resource()).id is None
    assert resolve_object_id(None, "") is None


@pytest.mark.parametrize("identifier", ["abc", "5f1d7f4b2c1e4a3b9c8d7e6", "zzzzzzzzzzzzzzzzzzzzzzzz", ""])
def test_invalid_explicit_id(identifier):
    with pytest.raises(InvalidIdentifierError):
        to_object_id(identifier)


def test_invalid_href_segment_is_a_validation_error():
    resource = make_resource(href="http://localhost/poi/not-an-id")

    with pytest.raises(ValidationError) as exc_info:
        resource_to_record(resource)

    assert exc_info.value.violations[0].value == "not-an-id"


def test_href_with_trailing_slash_is_invalid():
    with pytest.raises(InvalidIdentifierError):
        resolve_object_id(None, f"http://localhost/poi/{OID}/")


def test_id_is_not_serialized():
    resource = PointOfInterestResource(id=OID, href=f"http://localhost/poi/{OID}", category="c", name="n")

    body = resource.to_json()

    assert "id" not in body
    assert body["href"].endswith(OID)
