"""
Request validation.

Each check returns a list of Violation objects instead of raising on the
first problem, so a 400 response can report everything that is wrong with
the request at once.
"""

import math
from typing import Any, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..common.exceptions import Violation
from .geo_point import GeoPoint
from .resource import PointOfInterestResource

EXPAND_DETAILS = "details"

MIN_RADIUS_METERS = 1
MAX_RADIUS_METERS = 100000

LOCATION_BOUNDS_MESSAGE = (
    "location coordinates must be [longitude, latitude] with longitude "
    "between -180 and 180 and latitude between -90 and 90"
)


def _json_safe(value: Any) -> Any:
    """NaN and Infinity are not valid JSON; report them as text."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    return value


def _json_safe_violations(violations: List[Violation]) -> List[Violation]:
    for violation in violations:
        violation.value = _json_safe(violation.value)
    return violations


class SearchParams(NamedTuple):
    latitude: float
    longitude: float
    radius: int
    expand_details: bool


def wants_details(expand: Optional[str]) -> bool:
    """`expand=details` in any letter case; everything else means no details."""
    return expand is not None and expand.lower() == EXPAND_DETAILS


def parse_resource(data: Any) -> Tuple[Optional[PointOfInterestResource], List[Violation]]:
    """Build a resource from a decoded JSON body, reporting type errors as violations."""
    if not isinstance(data, dict):
        return None, [Violation("request body must be a JSON object", data)]

    try:
        resource = PointOfInterestResource.model_validate(data)
    except PydanticValidationError as e:
        violations = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            violations.append(Violation(f"{field}: {error['msg']}", error.get("input")))
        return None, _json_safe_violations(violations)

    return resource, []


def validate_location(location: Optional[GeoPoint]) -> List[Violation]:
    if location is None:
        return [Violation("location must not be null", None)]
    if not location.is_within_bounds():
        return [Violation(LOCATION_BOUNDS_MESSAGE, list(location.coordinates))]
    return []


def validate_resource(resource: PointOfInterestResource) -> List[Violation]:
    violations = []
    if not resource.category:
        violations.append(Violation("category must not be empty", resource.category))
    if not resource.name:
        violations.append(Violation("name must not be empty", resource.name))
    violations.extend(validate_location(resource.location))
    return _json_safe_violations(violations)


def _parse_float(args: Mapping[str, str], key: str, violations: List[Violation]) -> Optional[float]:
    raw = args.get(key)
    if raw is None or raw == "":
        violations.append(Violation(f"{key} is required", raw))
        return None
    try:
        return float(raw)
    except ValueError:
        violations.append(Violation(f"{key} must be a number", raw))
        return None


def _parse_int(args: Mapping[str, str], key: str, violations: List[Violation]) -> Optional[int]:
    raw = args.get(key)
    if raw is None or raw == "":
        violations.append(Violation(f"{key} is required", raw))
        return None
    try:
        return int(raw)
    except ValueError:
        violations.append(Violation(f"{key} must be an integer", raw))
        return None


def validate_search_params(args: Mapping[str, str]) -> Tuple[Optional[SearchParams], List[Violation]]:
    """Parse and range-check `lat`, `lon`, `radius` and `expand` query parameters."""
    violations: List[Violation] = []

    latitude = _parse_float(args, "lat", violations)
    longitude = _parse_float(args, "lon", violations)
    radius = _parse_int(args, "radius", violations)

    if latitude is not None and not (-90 <= latitude <= 90):
        violations.append(Violation("latitude must be between -90 and 90", latitude))
    if longitude is not None and not (-180 <= longitude <= 180):
        violations.append(Violation("longitude must be between -180 and 180", longitude))
    if radius is not None and not (MIN_RADIUS_METERS <= radius <= MAX_RADIUS_METERS):
        violations.append(Violation(
            f"radius must be between {MIN_RADIUS_METERS} and {MAX_RADIUS_METERS}", radius
        ))

    if violations:
        return None, _json_safe_violations(violations)

    return SearchParams(latitude, longitude, radius, wants_details(args.get("expand"))), []
