"""Health check controller."""

from flask import Blueprint, jsonify


def init_app(store_probe):
    """
    Initialize health check blueprint.

    Args:
        store_probe: callable returning True when the data store answers
    """
    health_api = Blueprint('health', __name__)

    @health_api.route('/health', methods=['GET'])
    def health_check():
        """
        Health check endpoint.
        Always 200 while the process serves requests; `status` is "degraded"
        when the data store does not answer.
        """
        store_ok = bool(store_probe())
        return jsonify({
            "status": "ok" if store_ok else "degraded",
            "mongodb": store_ok
        }), 200

    return health_api
