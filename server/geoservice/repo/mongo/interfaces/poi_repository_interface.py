"""
POI Repository Interface - Data Access Contract
===============================================

Purpose:
- Define the narrow set of store operations the service layer relies on
- Enable dependency injection and unit testing

Implementations:
- PointOfInterestRepository (MongoDB) - Production implementation
- InMemoryPOIRepository (tests/fakes.py) - For unit testing
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bson import ObjectId

from ....model.geo_point import GeoPoint
from ....model.mongo.poi import PointOfInterestRecord


class POIRepositoryInterface(ABC):
    """
    Abstract interface for point of interest persistence.

    Every method may raise StoreUnavailableError when the store cannot be
    reached; "not found" is reported through return values, never raised.
    """

    @abstractmethod
    def ensure_indexes(self) -> None:
        """
        One-time setup of the geospatial index on `location`.

        Must run before the first find_near call.
        """
        pass

    @abstractmethod
    def save(self, record: PointOfInterestRecord) -> PointOfInterestRecord:
        """
        Insert or fully replace a record.

        Args:
            record: Record without id (store assigns one) or with id
                (document with that id is replaced, or created if missing)

        Returns:
            The stored record, id populated
        """
        pass

    @abstractmethod
    def find_by_id(self, object_id: ObjectId) -> Optional[PointOfInterestRecord]:
        """
        Load a record.

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    def delete_by_id(self, object_id: ObjectId) -> bool:
        """
        Delete a record.

        Returns:
            True if a document was removed, False if none existed
        """
        pass

    @abstractmethod
    def find_near(self, point: GeoPoint, radius_meters: float) -> List[PointOfInterestRecord]:
        """
        Records within radius_meters of point (spherical distance).

        Returns:
            Records in the order the store's geo index yields them (nearest first)
        """
        pass
