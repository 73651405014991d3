import pytest

from config import TestingConfig
from geoservice import create_app
from geoservice.core.di_container import DIContainer
from geoservice.service.poi_service import PointOfInterestService

from fakes import InMemoryPOIRepository


@pytest.fixture
def poi_repo():
    return InMemoryPOIRepository()


@pytest.fixture
def poi_service(poi_repo):
    return PointOfInterestService(poi_repo)


@pytest.fixture
def app(poi_repo):
    DIContainer.reset()
    app = create_app(TestingConfig, poi_repository=poi_repo)
    yield app
    DIContainer.reset()


@pytest.fixture
def client(app):
    return app.test_client()
