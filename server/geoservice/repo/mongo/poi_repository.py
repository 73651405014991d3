"""
POI Repository - MongoDB Data Access Layer
==========================================

Purpose:
- CRUD operations for the point_of_interest collection
- Proximity search on the 2dsphere index
- Translate driver failures into StoreUnavailableError

Proximity query sent to MongoDB:

    db.point_of_interest.find({
        location: {
            $nearSphere: {
                $geometry: {type: "Point", coordinates: [lon, lat]},
                $maxDistance: <radius in meters>
            }
        }
    })
"""

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import GEOSPHERE
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ...common.exceptions import StoreUnavailableError
from ...core.clients.mongodb_client import get_mongodb_client
from ...model.geo_point import GeoPoint
from ...model.mongo.poi import PointOfInterestRecord
from .interfaces import POIRepositoryInterface

logger = logging.getLogger(__name__)


class PointOfInterestRepository(POIRepositoryInterface):
    """
    Repository for point of interest data access.

    The collection is looked up through the process-wide MongoDB client on
    every call, so a store that was down at startup is picked up once it
    comes back. The 2dsphere index is retried before each search until it
    has been created once. Tests pass a collection directly.
    """

    def __init__(self, config, collection: Optional[Collection] = None):
        self._config = config
        self._collection = collection
        self.collection_name = config.MONGODB_POI_COLLECTION
        self._indexes_ready = False

    def _get_collection(self) -> Collection:
        if self._collection is not None:
            return self._collection

        try:
            collection = get_mongodb_client(self._config).get_collection(self.collection_name)
        except PyMongoError as e:
            logger.error(f"[MONGODB] Store not reachable: {e}")
            raise StoreUnavailableError("MongoDB is not reachable") from e

        if collection is None:
            raise StoreUnavailableError(f"Collection '{self.collection_name}' not available")
        return collection

    def ensure_indexes(self) -> None:
        collection = self._get_collection()
        try:
            collection.create_index([("location", GEOSPHERE)], name="idx_location_2dsphere")
        except PyMongoError as e:
            logger.error(f"[MONGODB] Failed to create indexes: {e}")
            raise StoreUnavailableError("Failed to create 2dsphere index") from e

        self._indexes_ready = True
        logger.info(f"[MONGODB] 2dsphere index ready on {self.collection_name}.location")

    def save(self, record: PointOfInterestRecord) -> PointOfInterestRecord:
        """
        Insert a new record or replace an existing one.

        A record with an id is written with replace_one(upsert=True), so a PUT
        for an unknown id creates the document under exactly that id.
        """
        collection = self._get_collection()
        doc = record.to_document()

        try:
            if record.id is None:
                result = collection.insert_one(doc)
                saved = record.with_id(result.inserted_id)
                logger.info(f"[POI] Created point of interest {saved.id}")
                return saved

            collection.replace_one({"_id": record.id}, doc, upsert=True)
            logger.info(f"[POI] Saved point of interest {record.id}")
            return record

        except PyMongoError as e:
            logger.error(f"[MONGODB] Failed to save point of interest {record.id}: {e}")
            raise StoreUnavailableError("Failed to save point of interest") from e

    def find_by_id(self, object_id: ObjectId) -> Optional[PointOfInterestRecord]:
        collection = self._get_collection()
        try:
            doc = collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"[MONGODB] Failed to load point of interest {object_id}: {e}")
            raise StoreUnavailableError("Failed to load point of interest") from e

        if doc is None:
            return None
        return PointOfInterestRecord.from_document(doc)

    def delete_by_id(self, object_id: ObjectId) -> bool:
        collection = self._get_collection()
        try:
            result = collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"[MONGODB] Failed to delete point of interest {object_id}: {e}")
            raise StoreUnavailableError("Failed to delete point of interest") from e

        logger.info(f"[POI] Delete {object_id}: deleted_count={result.deleted_count}")
        return result.deleted_count > 0

    def find_near(self, point: GeoPoint, radius_meters: float) -> List[PointOfInterestRecord]:
        # $nearSphere needs the 2dsphere index; startup may have run without a store
        if not self._indexes_ready:
            self.ensure_indexes()

        collection = self._get_collection()
        query = {
            "location": {
                "$nearSphere": {
                    "$geometry": point.to_geojson(),
                    "$maxDistance": radius_meters
                }
            }
        }

        try:
            docs = list(collection.find(query))
        except PyMongoError as e:
            logger.error(f"[MONGODB] Proximity search failed: {e}")
            raise StoreUnavailableError("Proximity search failed") from e

        logger.info(
            f"[POI] Found {len(docs)} points of interest within {radius_meters}m "
            f"of lat={point.latitude}, lon={point.longitude}"
        )
        return [PointOfInterestRecord.from_document(doc) for doc in docs]
