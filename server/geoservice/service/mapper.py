"""
Record <-> resource mapping.

Field-by-field conversion, no normalization: category, name, details and
location come out exactly as they went in. Identity is the only field that
changes shape (ObjectId in the record, string id / href on the resource).
"""

from typing import Optional

from bson import ObjectId

from ..common.exceptions import InvalidIdentifierError
from ..model.mongo.poi import PointOfInterestRecord
from ..model.resource import PointOfInterestResource


def to_object_id(identifier: str) -> ObjectId:
    """Parse a 24-hex-digit id, raising InvalidIdentifierError otherwise."""
    if not isinstance(identifier, str) or not ObjectId.is_valid(identifier):
        raise InvalidIdentifierError(identifier)
    return ObjectId(identifier)


def resolve_object_id(identifier: Optional[str], href: Optional[str]) -> Optional[ObjectId]:
    """
    Explicit id first, then the last path segment of href, else None.

    Example:
        resolve_object_id(None, "http://host/poi/5f1d7f4b2c1e4a3b9c8d7e6f")
        -> ObjectId("5f1d7f4b2c1e4a3b9c8d7e6f")
    """
    if identifier is not None:
        return to_object_id(identifier)
    if href:
        return to_object_id(href.rsplit("/", 1)[-1])
    return None


def object_id_to_str(object_id: Optional[ObjectId]) -> Optional[str]:
    return str(object_id) if object_id is not None else None


def record_to_resource(record: PointOfInterestRecord) -> PointOfInterestResource:
    return PointOfInterestResource(
        id=object_id_to_str(record.id),
        category=record.category,
        name=record.name,
        details=record.details,
        location=record.location,
    )


def resource_to_record(resource: PointOfInterestResource) -> PointOfInterestRecord:
    return PointOfInterestRecord(
        id=resolve_object_id(resource.id, resource.href),
        category=resource.category,
        name=resource.name,
        details=resource.details,
        location=resource.location,
    )
