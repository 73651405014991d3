import atexit
import logging

from flask import Flask
from flask_cors import CORS
from pymongo.errors import PyMongoError

from config import Config
from .common.exceptions import StoreUnavailableError
from .errors import handle_exception

logger = logging.getLogger(__name__)

_shutdown_hook_registered = False


def _register_shutdown_hook():
    """Release the pooled MongoDB client when the process exits."""
    global _shutdown_hook_registered

    if _shutdown_hook_registered:
        return
    from .core.clients.mongodb_client import close_mongodb_connection
    atexit.register(close_mongodb_connection)
    _shutdown_hook_registered = True


def _mongodb_probe(config_class):
    from .core.clients.mongodb_client import get_mongodb_client

    def probe():
        try:
            return get_mongodb_client(config_class).is_healthy()
        except PyMongoError:
            return False

    return probe


def create_app(config_class=Config, poi_repository=None):
    """
    Build the Flask application.

    Args:
        config_class: Config class loaded into app.config
        poi_repository: Repository to use instead of MongoDB; when given, no
            MongoDB connection is opened
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .common.logging_config import setup_logging
    setup_logging(app)

    CORS(app, resources={r"/*": {
        "origins": app.config.get("CORS_ORIGINS", "*"),
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": "*",
        "expose_headers": ["Location"]
    }})

    from .config.di_setup import init_di
    from .repo.mongo.interfaces import POIRepositoryInterface
    from .service.poi_service import PointOfInterestService

    if poi_repository is None:
        # Acquire the MongoDB client once for the whole process
        from .core.clients.mongodb_client import get_mongodb_client
        _register_shutdown_hook()
        try:
            get_mongodb_client(config_class)
            logger.info("[INIT] MongoDB initialized successfully")
        except PyMongoError as e:
            logger.warning(f"[INIT] MongoDB initialization failed: {e}")
            logger.warning("[INIT] Application will continue in degraded mode")
        store_probe = _mongodb_probe(config_class)
    else:
        store_probe = lambda: True

    container = init_di(config_class, poi_repository)

    try:
        container.resolve(POIRepositoryInterface.__name__).ensure_indexes()
    except StoreUnavailableError as e:
        logger.warning(f"[INIT] Index setup skipped: {e.message}")

    from .controller.poi import init_app as poi_api_init
    poi_api = poi_api_init(container.resolve(PointOfInterestService.__name__))
    app.register_blueprint(poi_api)

    from .controller.health import init_app as health_api_init
    health_api = health_api_init(store_probe)
    app.register_blueprint(health_api)

    app.register_error_handler(Exception, handle_exception)

    return app
