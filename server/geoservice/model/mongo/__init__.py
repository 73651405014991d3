from .poi import PointOfInterestRecord

__all__ = ["PointOfInterestRecord"]
