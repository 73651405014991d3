import threading
import time
from unittest.mock import MagicMock

import pytest
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

import geoservice
from config import TestingConfig
from geoservice import create_app
from geoservice.core.clients import mongodb_client
from geoservice.core.clients.mongodb_client import (
    MongoDBClient,
    close_mongodb_connection,
    get_mongodb_client,
)
from geoservice.core.di_container import DIContainer


@pytest.fixture
def mongo(monkeypatch):
    """Patched MongoClient class; the process-wide client starts and ends empty."""
    factory = MagicMock(name="MongoClient")
    monkeypatch.setattr(mongodb_client, "MongoClient", factory)
    close_mongodb_connection()
    yield factory
    close_mongodb_connection()


@pytest.fixture
def atexit_register(monkeypatch, mongo):
    register = MagicMock()
    monkeypatch.setattr(geoservice.atexit, "register", register)
    monkeypatch.setattr(geoservice, "_shutdown_hook_registered", False)
    DIContainer.reset()
    yield register
    DIContainer.reset()


def _collection(mongo):
    return mongo.return_value.__getitem__.return_value.__getitem__.return_value


def test_connect_pings_with_configured_pool(mongo):
    client = MongoDBClient(TestingConfig)

    mongo.assert_called_once_with(
        TestingConfig.MONGODB_URI,
        maxPoolSize=TestingConfig.MONGODB_MAX_POOL_SIZE,
        minPoolSize=TestingConfig.MONGODB_MIN_POOL_SIZE,
        serverSelectionTimeoutMS=TestingConfig.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        connectTimeoutMS=TestingConfig.MONGODB_CONNECT_TIMEOUT_MS,
        retryWrites=True,
        retryReads=True
    )
    mongo.return_value.admin.command.assert_called_once_with("ping")
    mongo.return_value.__getitem__.assert_called_once_with("demo-campus-test")
    assert client.get_database() is mongo.return_value.__getitem__.return_value
    assert client.is_healthy() is True


def test_failed_connect_closes_pool_and_raises(mongo):
    mongo.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")

    with pytest.raises(ServerSelectionTimeoutError):
        MongoDBClient(TestingConfig)

    mongo.return_value.close.assert_called_once()


def test_close_clears_handle_and_get_database_reconnects(mongo):
    client = MongoDBClient(TestingConfig)

    client.close()

    mongo.return_value.close.assert_called_once()
    assert client.is_healthy() is False

    assert client.get_database() is not None
    assert mongo.call_count == 2


def test_reconnect_failure_returns_none(mongo):
    client = MongoDBClient(TestingConfig)
    client.close()
    mongo.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")

    assert client.get_database() is None
    assert client.get_collection("point_of_interest") is None


def test_failed_ping_is_unhealthy(mongo):
    client = MongoDBClient(TestingConfig)
    mongo.return_value.admin.command.side_effect = AutoReconnect("connection reset")

    assert client.is_healthy() is False


def test_process_wide_client_is_created_once_and_closed(mongo):
    with pytest.raises(RuntimeError):
        get_mongodb_client()

    client = get_mongodb_client(TestingConfig)

    assert get_mongodb_client() is client
    assert mongo.call_count == 1

    close_mongodb_connection()

    mongo.return_value.close.assert_called_once()
    with pytest.raises(RuntimeError):
        get_mongodb_client()


def test_concurrent_first_use_builds_one_client(mongo):
    def slow_client(*args, **kwargs):
        time.sleep(0.05)
        return MagicMock()

    mongo.side_effect = slow_client
    threads = [threading.Thread(target=get_mongodb_client, args=(TestingConfig,)) for _ in range(8)]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert mongo.call_count == 1


def test_create_app_registers_shutdown_hook_once(atexit_register):
    create_app(TestingConfig)
    DIContainer.reset()
    create_app(TestingConfig)

    atexit_register.assert_called_once_with(close_mongodb_connection)


def test_create_app_with_store_up(atexit_register, mongo):
    client = create_app(TestingConfig).test_client()

    _collection(mongo).create_index.assert_called_once_with(
        [("location", "2dsphere")], name="idx_location_2dsphere"
    )
    assert client.get("/health").get_json() == {"status": "ok", "mongodb": True}


def test_create_app_with_store_down_then_recovering(atexit_register, mongo):
    ping = mongo.return_value.admin.command
    ping.side_effect = ServerSelectionTimeoutError("down")

    client = create_app(TestingConfig).test_client()

    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "degraded", "mongodb": False}
    assert client.get("/poi?lat=0&lon=0&radius=10").status_code == 500
    _collection(mongo).create_index.assert_not_called()

    ping.side_effect = None

    assert client.get("/health").get_json() == {"status": "ok", "mongodb": True}
    response = client.get("/poi?lat=0&lon=0&radius=10")
    assert response.status_code == 200
    assert response.get_json() == []
    _collection(mongo).create_index.assert_called_once()
