import logging

from app.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging once; uvicorn keeps its own handlers."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
