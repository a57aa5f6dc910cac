"""Logging setup shared by the API server and the skills board CLI.

Both entry points log to stdout through a single root handler.  The server
uses ``settings.log_level``; the board passes its own quieter level so its
rendered output is not interleaved with request chatter.
"""

import logging
import sys

from skills_api.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Libraries whose INFO lines would drown out request and store logging
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "uvicorn.access")


def resolve_level(name: str | None) -> int:
    """
    Map a level name onto a ``logging`` constant.

    Args:
        name: Level name in any case; None means ``settings.log_level``

    Returns:
        The numeric level, INFO when the name is unknown
    """
    level = getattr(logging, (name or settings.log_level).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | None = None) -> None:
    """
    Point the root logger at stdout.

    Safe to call more than once: earlier handlers are replaced, not stacked.

    Args:
        level: Override for ``settings.log_level``
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
