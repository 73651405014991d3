from .poi_service import PointOfInterestService, UpsertResult

__all__ = ["PointOfInterestService", "UpsertResult"]
