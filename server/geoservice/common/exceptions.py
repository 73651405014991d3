"""
Custom Exception Hierarchy for the Geo Service
==============================================

Every failure the service layer can report has its own type here, so the
HTTP boundary maps errors by class instead of inspecting messages.

Usage:
    from geoservice.common.exceptions import StoreUnavailableError

    try:
        collection.find_one({"_id": oid})
    except PyMongoError as e:
        raise StoreUnavailableError("Failed to load point of interest") from e
"""

from typing import Any, List, Optional


class Violation:
    """A single rejected input: what is wrong and the value that was given."""

    __slots__ = ("message", "value")

    def __init__(self, message: str, value: Any = None):
        self.message = message
        self.value = value

    def to_dict(self) -> dict:
        return {"message": self.message, "value": self.value}

    def __eq__(self, other):
        if not isinstance(other, Violation):
            return NotImplemented
        return self.message == other.message and self.value == other.value

    def __repr__(self):
        return f"Violation({self.message!r}, {self.value!r})"


class GeoServiceError(Exception):
    """
    Base exception for all geo service errors.

    Attributes:
        message: Human-readable error message
        code: Error code for API responses
        details: Additional error details
    """

    def __init__(self, message: str, code: str = "GEO000", details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details
        }


# ============================================
# Validation Exceptions
# ============================================

class ValidationError(GeoServiceError):
    """Input validation failed. Carries every violation found, not just the first."""

    def __init__(self, message: str, violations: Optional[List[Violation]] = None, details: dict = None):
        super().__init__(message, code="VAL001", details=details)
        self.violations = list(violations) if violations else [Violation(message)]


class InvalidIdentifierError(ValidationError):
    """An id (explicit or taken from an href) is not a valid ObjectId."""

    def __init__(self, identifier: Any):
        message = f"'{identifier}' is not a valid point of interest id"
        super().__init__(message, violations=[Violation(message, identifier)], details={"identifier": identifier})
        self.code = "VAL002"
        self.identifier = identifier


# ============================================
# Resource Exceptions
# ============================================

class NotFoundError(GeoServiceError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str = None, details: dict = None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} with id '{identifier}' not found"
        details = details or {}
        details["resource"] = resource
        if identifier:
            details["identifier"] = identifier
        super().__init__(message, code="NF001", details=details)


# ============================================
# Database Exceptions
# ============================================

class DatabaseError(GeoServiceError):
    """Base exception for database-related errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="DB001", details=details)


class StoreUnavailableError(DatabaseError):
    """MongoDB could not be reached or a driver operation failed."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)
        self.code = "DB002"


# ============================================
# Client Exceptions
# ============================================

class UploadError(GeoServiceError):
    """The POI service rejected an upload from the GPX importer."""

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code="UPL001", details=details)
        self.status_code = status_code
