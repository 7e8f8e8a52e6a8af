import logging
from logging.handlers import RotatingFileHandler

from domain.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _file_handler() -> RotatingFileHandler:
    log_path = settings.LOG_FILE_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_path,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )


def configure_logging(level: str | None = None):
    """Send every logger to the rotating log file and to stderr.

    Both entry points call this before importing anything else, and calling
    it again replaces the handlers instead of stacking them.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    for handler in (_file_handler(), logging.StreamHandler()):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # one line per bot-server connection otherwise
    logging.getLogger("urllib3").setLevel(logging.WARNING)
