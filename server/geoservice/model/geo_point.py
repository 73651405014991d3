"""
GeoPoint - GeoJSON Point Value Object
=====================================

Purpose:
- One latitude/longitude pair, stored the way MongoDB's 2dsphere index and
  GeoJSON expect it: coordinates = [longitude, latitude]
- Callers read `latitude` / `longitude` by name; positional access to the
  coordinates array stays inside this module

The same model is used for the persisted document and for the JSON resource,
so the wire shape is identical in both places:

    {"type": "Point", "coordinates": [13.7301, 51.0308]}
"""

from numbers import Real
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

LONGITUDE_INDEX = 0
LATITUDE_INDEX = 1

MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0


def to_wire(latitude: float, longitude: float) -> List[float]:
    """(lat, lon) -> [lon, lat]"""
    return [longitude, latitude]


def from_wire(coordinates: Any) -> Optional[Tuple[float, float]]:
    """
    [lon, lat] -> (lat, lon)

    Returns None for anything that is not a two-element numeric array
    (None, wrong length, strings, booleans).
    """
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
        return None
    if not all(isinstance(c, Real) and not isinstance(c, bool) for c in coordinates):
        return None
    return (
        float(coordinates[LATITUDE_INDEX]),
        float(coordinates[LONGITUDE_INDEX]),
    )


def is_within_bounds(latitude: float, longitude: float) -> bool:
    """NaN never passes."""
    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
    )


class GeoPoint(BaseModel):
    """GeoJSON Point for the MongoDB 2dsphere index. Immutable."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Point"] = Field(default="Point", description="GeoJSON type")
    coordinates: Tuple[FiniteFloat, FiniteFloat] = Field(..., description="[longitude, latitude]")

    @classmethod
    def of(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(coordinates=tuple(to_wire(latitude, longitude)))

    @property
    def latitude(self) -> float:
        return self.coordinates[LATITUDE_INDEX]

    @property
    def longitude(self) -> float:
        return self.coordinates[LONGITUDE_INDEX]

    def with_coordinates(self, latitude: float, longitude: float) -> "GeoPoint":
        """Replace both coordinates at once; the original point is untouched."""
        return self.model_copy(update={"coordinates": tuple(to_wire(latitude, longitude))})

    def is_within_bounds(self) -> bool:
        return is_within_bounds(self.latitude, self.longitude)

    def to_geojson(self) -> Dict[str, Any]:
        return {"type": self.type, "coordinates": list(self.coordinates)}

    @classmethod
    def from_geojson(cls, data: Any) -> Optional["GeoPoint"]:
        """Rebuild from a stored GeoJSON dict; None when the dict is malformed."""
        if not isinstance(data, dict):
            return None
        lat_lon = from_wire(data.get("coordinates"))
        if lat_lon is None:
            return None
        return cls.of(*lat_lon)
