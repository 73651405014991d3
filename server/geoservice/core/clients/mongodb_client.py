"""
MongoDB Client - Process-wide Connection
========================================

One pooled MongoClient per process. create_app acquires it at startup and
an atexit hook releases it; repositories only ever ask it for a collection.

Usage:
    from geoservice.core.clients.mongodb_client import get_mongodb_client

    client = get_mongodb_client(Config)
    collection = client.get_collection("point_of_interest")
    doc = collection.find_one({"_id": ObjectId("5f1d7f4b2c1e4a3b9c8d7e6f")})
"""

import logging
import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConfigurationError, ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)


class MongoDBClient:
    """
    Pooled connection to the configured database.

    If the server is down the handle stays empty; the next get_database()
    call tries again, and callers receive None until that succeeds.
    """

    def __init__(self, config):
        self._config = config
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._connect()

    def _connect(self):
        """Open the pool and ping the server; raises if it does not answer."""
        config = self._config
        host = config.MONGODB_URI.split('@')[-1]
        logger.info(f"[MONGODB] Connecting to {host}")

        try:
            self._client = MongoClient(
                config.MONGODB_URI,
                maxPoolSize=config.MONGODB_MAX_POOL_SIZE,
                minPoolSize=config.MONGODB_MIN_POOL_SIZE,
                serverSelectionTimeoutMS=config.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                connectTimeoutMS=config.MONGODB_CONNECT_TIMEOUT_MS,
                retryWrites=True,
                retryReads=True
            )
            self._db = self._client[config.MONGODB_DB_NAME]
            self._client.admin.command('ping')
        except (ConnectionFailure, ConfigurationError) as e:
            logger.error(f"[MONGODB] Cannot connect to {host}: {e}")
            self.close()
            raise

        logger.info(f"[MONGODB] Using database '{config.MONGODB_DB_NAME}'")

    def get_database(self) -> Optional[Database]:
        if self._db is None:
            logger.warning("[MONGODB] No database handle, reconnecting")
            try:
                self._connect()
            except PyMongoError as e:
                logger.error(f"[MONGODB] Reconnect failed: {e}")
                return None
        return self._db

    def get_collection(self, collection_name: str) -> Optional[Collection]:
        """Collection by name, or None while the database is unreachable."""
        db = self.get_database()
        return db[collection_name] if db is not None else None

    def is_healthy(self) -> bool:
        if self._client is None:
            return False
        try:
            self._client.admin.command('ping')
        except PyMongoError as e:
            logger.warning(f"[MONGODB] Ping failed: {e}")
            return False
        return True

    def close(self):
        if self._client is not None:
            self._client.close()
            logger.info("[MONGODB] Connection pool closed")
        self._client = None
        self._db = None


_client: Optional[MongoDBClient] = None
_client_lock = threading.Lock()


def get_mongodb_client(config=None) -> MongoDBClient:
    """
    The process-wide client, created on first use.

    Args:
        config: Config class; only needed by the first caller
    """
    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                if config is None:
                    raise RuntimeError("MongoDB client not initialized; pass a config on first use")
                _client = MongoDBClient(config)
    return _client


def close_mongodb_connection():
    """atexit hook registered by create_app."""
    global _client

    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
