"""
MongoDB Repository Interfaces
"""

from .poi_repository_interface import POIRepositoryInterface

__all__ = [
    'POIRepositoryInterface',
]
