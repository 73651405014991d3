"""
Application-wide error handler.

Registered for Exception in create_app; turns the exception hierarchy from
common.exceptions into HTTP responses.
"""
import logging

from werkzeug.exceptions import HTTPException

from .common.exceptions import (
    DatabaseError,
    GeoServiceError,
    NotFoundError,
    ValidationError,
)
from .utils.response_helpers import build_error_response, build_violation_response

logger = logging.getLogger(__name__)


def handle_exception(e):
    if isinstance(e, ValidationError):
        logger.info(f"[POI] Rejected request: {e.violations}")
        return build_violation_response(e.violations, 400)

    if isinstance(e, NotFoundError):
        return build_error_response(e.message, "NOT_FOUND", 404)

    if isinstance(e, DatabaseError):
        logger.error(f"[ERROR] {e.code} {e.message}", exc_info=e)
        return build_error_response("Data store is not available", e.code, 500)

    if isinstance(e, GeoServiceError):
        logger.error(f"[ERROR] {e.code} {e.message}", exc_info=e)
        return build_error_response(e.message, e.code, 500)

    if isinstance(e, HTTPException):
        return build_error_response(e.description, e.name.upper().replace(" ", "_"), e.code)

    logger.error(f"[ERROR] Unhandled exception: {e}", exc_info=e)
    return build_error_response("Internal server error", "INTERNAL_ERROR", 500)
