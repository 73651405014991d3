"""
Point of Interest Service - Business Logic Layer
================================================

Purpose:
- Orchestrate repository calls and record/resource mapping
- Upsert semantics for PUT, reported as created vs. updated
- Detail projection: details are only returned when explicitly expanded

Lifecycle of a single point of interest:

    nonexistent --create--> persisted --update*--> persisted --delete--> nonexistent

Known limitation:
    update() checks for existence and then saves in two separate store calls.
    Two concurrent updates for the same unknown id can both see "absent" and
    both report "created". MongoDB's per-document atomicity still leaves a
    single document behind (the later replace wins); no extra locking is done
    here.
"""

import logging
from typing import List, NamedTuple, Optional

from ..common.exceptions import NotFoundError, ValidationError
from ..model.geo_point import GeoPoint
from ..model.resource import PointOfInterestResource
from ..model.validation import validate_resource
from ..repo.mongo.interfaces import POIRepositoryInterface
from .mapper import record_to_resource, resource_to_record, to_object_id

logger = logging.getLogger(__name__)

RESOURCE_NAME = "PointOfInterest"


class UpsertResult(NamedTuple):
    resource: PointOfInterestResource
    created: bool


class PointOfInterestService:
    """
    Point of interest CRUD and proximity search.

    Example:
        service = PointOfInterestService(poi_repo)

        created = service.create(resource)
        poi = service.get_by_id(created.id, expand_details=True)
        nearby = service.list_near(51.0308, 13.7301, radius_meters=1000)
    """

    def __init__(self, poi_repo: POIRepositoryInterface):
        self.poi_repo = poi_repo

    @staticmethod
    def _project(resource: PointOfInterestResource, expand_details: bool) -> PointOfInterestResource:
        return resource if expand_details else resource.without_details()

    @staticmethod
    def _check(resource: PointOfInterestResource):
        violations = validate_resource(resource)
        if violations:
            raise ValidationError("Invalid point of interest", violations)

    def get_by_id(self, poi_id: str, expand_details: bool = False) -> Optional[PointOfInterestResource]:
        """
        Get a point of interest by id.

        Args:
            poi_id: 24-hex-digit ObjectId string
            expand_details: Include the `details` field

        Returns:
            Resource if found, None otherwise

        Raises:
            InvalidIdentifierError: poi_id is not a valid ObjectId
        """
        record = self.poi_repo.find_by_id(to_object_id(poi_id))
        if record is None:
            logger.info(f"[POI] {poi_id} not found")
            return None

        return self._project(record_to_resource(record), expand_details)

    def create(self, resource: PointOfInterestResource) -> PointOfInterestResource:
        """
        Persist a new point of interest.

        The id comes from the resource (id, then href) when present; otherwise
        the store assigns one.

        Raises:
            ValidationError: category, name or location missing/out of range
        """
        self._check(resource)
        saved = self.poi_repo.save(resource_to_record(resource))
        return record_to_resource(saved)

    def update(self, poi_id: str, resource: PointOfInterestResource) -> UpsertResult:
        """
        Replace every field except the id, creating the record if it is missing.

        Returns:
            UpsertResult(resource, created); created is True when no record
            existed for poi_id beforehand
        """
        object_id = to_object_id(poi_id)
        self._check(resource)

        incoming = resource_to_record(resource.model_copy(update={"id": poi_id}))
        existing = self.poi_repo.find_by_id(object_id)

        if existing is None:
            logger.info(f"[POI] {poi_id} does not exist, creating it")
            saved = self.poi_repo.save(incoming)
            return UpsertResult(record_to_resource(saved), True)

        saved = self.poi_repo.save(existing.replace_fields(incoming))
        return UpsertResult(record_to_resource(saved), False)

    def delete(self, poi_id: str) -> None:
        """
        Delete a point of interest.

        Raises:
            NotFoundError: nothing stored under poi_id (also on repeated deletes)
        """
        if not self.poi_repo.delete_by_id(to_object_id(poi_id)):
            raise NotFoundError(RESOURCE_NAME, poi_id)
        logger.info(f"[POI] Deleted {poi_id}")

    def list_near(
        self,
        latitude: float,
        longitude: float,
        radius_meters: int,
        expand_details: bool = False
    ) -> List[PointOfInterestResource]:
        """
        Points of interest within radius_meters of (latitude, longitude).

        Order is whatever the store's geo index returns (nearest first); it is
        not re-sorted here.
        """
        records = self.poi_repo.find_near(GeoPoint.of(latitude, longitude), radius_meters)
        return [self._project(record_to_resource(record), expand_details) for record in records]
