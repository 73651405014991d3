import os
from dotenv import load_dotenv
from pathlib import Path


env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "secret_key")
    TESTING = False

    # MongoDB Configuration
    MONGODB_URI = os.environ.get("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB_NAME = os.environ.get("MONGODB_DB_NAME", "demo-campus")
    MONGODB_POI_COLLECTION = os.environ.get("MONGODB_POI_COLLECTION", "point_of_interest")

    # Connection pool and timeouts belong to the driver, not to the service layer
    MONGODB_MAX_POOL_SIZE = int(os.environ.get("MONGODB_MAX_POOL_SIZE", 50))
    MONGODB_MIN_POOL_SIZE = int(os.environ.get("MONGODB_MIN_POOL_SIZE", 0))
    MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(os.environ.get("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000))
    MONGODB_CONNECT_TIMEOUT_MS = int(os.environ.get("MONGODB_CONNECT_TIMEOUT_MS", 10000))

    # Logging Configuration
    LOG_DIR = os.environ.get("LOG_DIR", "logs")
    LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "True").lower() == "true"
    LOG_FILE_MAX_BYTES = int(os.environ.get("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.environ.get("LOG_FILE_BACKUP_COUNT", 5))

    # CORS Configuration
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Used by scripts/import_gpx.py
    POI_SERVICE_URL = os.environ.get("POI_SERVICE_URL", "http://localhost:5000/poi")


class TestingConfig(Config):
    TESTING = True
    LOG_TO_FILE = False
    MONGODB_DB_NAME = "demo-campus-test"
