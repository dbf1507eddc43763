"""Logging setup.

The terminal belongs to curses while the app runs, so records go to a
file under the config dir instead of stderr.

Usage:
    from logger import get_logger
    logger = get_logger(__name__)
"""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ENV_LEVEL = "FRUITCAT_LOG_LEVEL"


def resolve_level(configured: str | None = None) -> int:
    name = (os.getenv(ENV_LEVEL) or configured or "INFO").upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: int = logging.INFO, path: str | None = None) -> None:
    kwargs = {"level": level, "format": LOG_FORMAT, "force": True}
    if path:
        kwargs["filename"] = path
        kwargs["encoding"] = "utf-8"
    else:
        kwargs["handlers"] = [logging.NullHandler()]
    logging.basicConfig(**kwargs)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
