"""
Core Module
============

Infrastructure components for the application:
- clients/: MongoDB client connection
- di_container: Dependency injection container

Usage:
    from geoservice.core.clients.mongodb_client import get_mongodb_client
    from geoservice.core import DIContainer
"""

from .di_container import DIContainer

__all__ = [
    'DIContainer',
]
