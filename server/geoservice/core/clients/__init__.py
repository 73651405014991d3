"""
Database Clients Module
=======================

Provides the process-wide MongoDB connection.
"""

from .mongodb_client import MongoDBClient, get_mongodb_client, close_mongodb_connection

__all__ = [
    'MongoDBClient',
    'get_mongodb_client',
    'close_mongodb_connection',
]
