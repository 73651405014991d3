"""
Logging setup for the geo service.

Everything goes through the root logger, so module loggers
(`logging.getLogger(__name__)`) need no handlers of their own. Messages
carry a bracketed tag for the subsystem: [MONGODB], [POI], [INIT], [IMPORT].
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

FILE_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s:%(lineno)d - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _file_handler(config, level):
    log_dir = Path(config.get("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # delay=True: the file is only opened on the first record
    handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=config.get("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024),
        backupCount=config.get("LOG_FILE_BACKUP_COUNT", 5),
        encoding='utf-8',
        delay=True
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(app):
    """
    Attach console and rotating file handlers to the root logger.

    Console shows warnings and up (everything in debug mode); the file at
    <LOG_DIR>/app.log gets INFO and up and is skipped when LOG_TO_FILE is off.
    Calling this again for a second app replaces the handlers instead of
    stacking them.
    """
    level = logging.DEBUG if app.debug else logging.INFO

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if app.debug else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(console)

    destination = "console only"
    if app.config.get("LOG_TO_FILE", True):
        file_handler = _file_handler(app.config, level)
        root.addHandler(file_handler)
        destination = file_handler.baseFilename

    app.logger.setLevel(level)
    app.logger.propagate = True
    app.logger.info(f"[INIT] Geo service logging to {destination} at {logging.getLevelName(level)}")

    return app
