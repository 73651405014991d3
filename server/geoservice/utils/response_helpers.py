"""
Response helper functions.

Small builders for the JSON responses the controllers return. All of them
produce `application/json` bodies through Flask's jsonify.
"""
from flask import jsonify


def build_error_response(message, result_code, status_code=400):
    """
    Build standardized error response.

    Args:
        message: Error message
        result_code: Application result code
        status_code: HTTP status code (default 400)

    Returns:
        tuple: (json_response, status_code)

    Example:
        return build_error_response(
            "Point of interest with id '...' not found",
            "POI_NOT_FOUND",
            404
        )
    """
    return jsonify({
        "resultMessage": message,
        "resultCode": result_code
    }), status_code


def build_violation_response(violations, status_code=400):
    """
    Build the validation failure body: a JSON array of {message, value}.

    Args:
        violations: iterable of Violation
        status_code: HTTP status code (default 400)
    """
    return jsonify([violation.to_dict() for violation in violations]), status_code


def build_empty_response(status_code=204, location=None):
    """Empty body, optionally with a Location header (201 Created)."""
    headers = {"Location": location} if location else {}
    return "", status_code, headers
