"""
Point of Interest Controller - REST Endpoints
=============================================

Endpoints:
- GET    /poi/{id}?expand=details   200 resource | 404
- POST   /poi                       201 + Location | 400 violations
- PUT    /poi/{id}                  201 + Location (created) | 204 (updated) | 400
- DELETE /poi/{id}                  204 | 404
- GET    /poi?lat=&lon=&radius=&expand=details   200 [resources] | 400

Validation failures return a JSON array of {"message", "value"} objects.
Malformed ids, store failures and anything unexpected are left to the
application error handler (see errors.py).

Example Requests:
    POST /poi
    Body: {"category": "gasstation", "name": "Shell",
           "location": {"type": "Point", "coordinates": [13.7301, 51.0308]}}

    GET /poi?lat=51.0308&lon=13.7301&radius=1000&expand=details
"""

import logging

from flask import jsonify, request, url_for

from ...model.resource import PointOfInterestResource
from ...model.validation import (
    parse_resource,
    validate_resource,
    validate_search_params,
    wants_details,
)
from ...service.poi_service import PointOfInterestService
from ...utils.response_helpers import (
    build_empty_response,
    build_error_response,
    build_violation_response,
)

logger = logging.getLogger(__name__)


class PointOfInterestController:
    """Binds PointOfInterestService to the routes of a blueprint."""

    def __init__(self, blueprint, poi_service: PointOfInterestService):
        self.blueprint = blueprint
        self.poi_service = poi_service
        self._register_routes()
        logger.info("[INFO] PointOfInterestController initialized")

    def _register_routes(self):
        bp = self.blueprint
        bp.add_url_rule("", "list_near", self.list_pois, methods=["GET"])
        bp.add_url_rule("", "create", self.create_poi, methods=["POST"])
        bp.add_url_rule("/<poi_id>", "get_by_id", self.get_poi, methods=["GET"])
        bp.add_url_rule("/<poi_id>", "update", self.update_poi, methods=["PUT"])
        bp.add_url_rule("/<poi_id>", "delete", self.delete_poi, methods=["DELETE"])

    def _href(self, resource: PointOfInterestResource) -> str:
        return url_for(f"{self.blueprint.name}.get_by_id", poi_id=resource.id, _external=True)

    def _read_body(self):
        """Returns (resource, None) or (None, 400 response)."""
        resource, violations = parse_resource(request.get_json(silent=True))
        if not violations:
            violations = validate_resource(resource)
        if violations:
            logger.info(f"[POI] Invalid body: {violations}")
            return None, build_violation_response(violations)
        return resource, None

    def get_poi(self, poi_id: str):
        """
        Get a point of interest by id.

        Query Parameters:
            expand (optional): "details" (any case) to include the details field
        """
        expand_details = wants_details(request.args.get("expand"))
        poi = self.poi_service.get_by_id(poi_id, expand_details=expand_details)

        if poi is None:
            return build_error_response(
                f"Point of interest with id '{poi_id}' not found",
                "POI_NOT_FOUND",
                404
            )

        return jsonify(poi.with_href(self._href(poi)).to_json()), 200

    def create_poi(self):
        """Create a point of interest; the store assigns the id."""
        resource, error_response = self._read_body()
        if error_response:
            return error_response

        created = self.poi_service.create(resource.without_identity())
        location = self._href(created)
        logger.info(f"[POI] Created {location}")
        return build_empty_response(201, location=location)

    def update_poi(self, poi_id: str):
        """Replace a point of interest, creating it under poi_id if missing."""
        resource, error_response = self._read_body()
        if error_response:
            return error_response

        result = self.poi_service.update(poi_id, resource)
        if result.created:
            return build_empty_response(201, location=self._href(result.resource))
        return build_empty_response(204)

    def delete_poi(self, poi_id: str):
        if self.poi_service.get_by_id(poi_id) is None:
            return build_error_response(
                f"Point of interest with id '{poi_id}' not found",
                "POI_NOT_FOUND",
                404
            )

        self.poi_service.delete(poi_id)
        return build_empty_response(204)

    def list_pois(self):
        """
        Points of interest near a location.

        Query Parameters:
            lat (required): Latitude (-90 to 90)
            lon (required): Longitude (-180 to 180)
            radius (required): Radius in meters (1 to 100000)
            expand (optional): "details" to include the details field
        """
        params, violations = validate_search_params(request.args)
        if violations:
            return build_violation_response(violations)

        pois = self.poi_service.list_near(
            params.latitude,
            params.longitude,
            params.radius,
            expand_details=params.expand_details
        )
        return jsonify([poi.with_href(self._href(poi)).to_json() for poi in pois]), 200
