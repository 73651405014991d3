"""
Point of Interest Controller Package
Flask Blueprint for /poi endpoints
"""

from flask import Blueprint


def init_app(poi_service):
    """Create the /poi blueprint and bind the controller to it."""
    from .poi_controller import PointOfInterestController

    poi_bp = Blueprint("poi", __name__, url_prefix="/poi")
    PointOfInterestController(poi_bp, poi_service)
    return poi_bp
