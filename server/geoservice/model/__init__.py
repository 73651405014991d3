"""
Data models: the GeoPoint value object, the stored record, the JSON
resource and request validation.
"""

from .geo_point import GeoPoint
from .mongo.poi import PointOfInterestRecord
from .resource import PointOfInterestResource

__all__ = [
    "GeoPoint",
    "PointOfInterestRecord",
    "PointOfInterestResource",
]
