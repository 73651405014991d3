from ..core.di_container import DIContainer


def setup_dependencies(config, poi_repository=None):
    """
    Register all dependencies in the container.

    Args:
        config: Config class used to build the MongoDB repository
        poi_repository: Pre-built repository (tests, tools); replaces MongoDB
    """
    from ..repo.mongo.interfaces import POIRepositoryInterface
    from ..repo.mongo.poi_repository import PointOfInterestRepository
    from ..service.poi_service import PointOfInterestService

    container = DIContainer.get_instance()

    if poi_repository is None:
        poi_repository = PointOfInterestRepository(config)
    container.register(POIRepositoryInterface.__name__, poi_repository)

    def create_poi_service(container):
        poi_repo = container.resolve(POIRepositoryInterface.__name__)
        return PointOfInterestService(poi_repo)

    container.register(PointOfInterestService.__name__, create_poi_service)

    return container


def init_di(config, poi_repository=None):
    """Initialize the dependency injection system.
    Call this function from your application's entry point."""
    return setup_dependencies(config, poi_repository)
