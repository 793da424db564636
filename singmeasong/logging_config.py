from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger once."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)

    root_logger.setLevel(log_level)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(log_level)

    logging.getLogger(__name__).info("Logging initialised at %s", logging.getLevelName(log_level))
