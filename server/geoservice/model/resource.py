"""
Point of Interest Resource - JSON Wire Model
============================================

What clients send and receive:

    {
        "href": "http://localhost:5000/poi/5f1d7f4b2c1e4a3b9c8d7e6f",
        "category": "gasstation",
        "name": "Shell",
        "details": "Open 24h",
        "location": {"type": "Point", "coordinates": [13.7301, 51.0308]}
    }

`id` travels with the object inside the service but is never serialized;
clients see the id only as the last segment of `href`. Absent fields are
omitted from the output rather than written as null.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .geo_point import GeoPoint


class PointOfInterestResource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    href: Optional[str] = None
    id: Optional[str] = Field(default=None, exclude=True)
    category: Optional[str] = None
    name: Optional[str] = None
    details: Optional[str] = None
    location: Optional[GeoPoint] = None

    def with_href(self, href: str) -> "PointOfInterestResource":
        return self.model_copy(update={"href": href})

    def without_details(self) -> "PointOfInterestResource":
        return self.model_copy(update={"details": None})

    def without_identity(self) -> "PointOfInterestResource":
        """Drop client-supplied id/href so the store assigns a fresh id."""
        return self.model_copy(update={"id": None, "href": None})

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
