"""
Point of Interest Record - MongoDB Document Model
=================================================

Purpose:
- Stored form of a point of interest in the point_of_interest collection
- Conversion to and from the raw BSON document

Document shape:
    {
        "_id": ObjectId("..."),
        "category": "gasstation",
        "name": "Shell",
        "details": "Open 24h",              # omitted when absent
        "location": {"type": "Point", "coordinates": [13.7301, 51.0308]}
    }
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..geo_point import GeoPoint


class PointOfInterestRecord(BaseModel):
    """
    A point of interest as persisted.

    `id` is assigned by MongoDB on insert (or taken from the PUT path on
    upsert) and is frozen afterwards; `replace_fields` is the only in-place
    mutation and never touches it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    id: Optional[ObjectId] = Field(default=None, frozen=True)
    category: Optional[str] = None
    name: Optional[str] = None
    details: Optional[str] = None
    location: Optional[GeoPoint] = None

    def replace_fields(self, other: "PointOfInterestRecord") -> "PointOfInterestRecord":
        """Overwrite every field except the id with the values of `other`."""
        self.category = other.category
        self.name = other.name
        self.details = other.details
        self.location = other.location
        return self

    def with_id(self, object_id: ObjectId) -> "PointOfInterestRecord":
        if self.id is not None and self.id != object_id:
            raise ValueError(f"Record already has id {self.id}")
        return self.model_copy(update={"id": object_id})

    def to_document(self) -> Dict[str, Any]:
        """BSON document without `_id`; the repository decides how the id is written."""
        doc: Dict[str, Any] = {
            "category": self.category,
            "name": self.name,
        }
        if self.details is not None:
            doc["details"] = self.details
        if self.location is not None:
            doc["location"] = self.location.to_geojson()
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PointOfInterestRecord":
        return cls(
            id=doc.get("_id"),
            category=doc.get("category"),
            name=doc.get("name"),
            details=doc.get("details"),
            location=GeoPoint.from_geojson(doc.get("location")),
        )
