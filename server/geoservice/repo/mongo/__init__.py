"""
MongoDB repositories.
"""

from .interfaces import POIRepositoryInterface
from .poi_repository import PointOfInterestRepository

__all__ = [
    'POIRepositoryInterface',
    'PointOfInterestRepository',
]
