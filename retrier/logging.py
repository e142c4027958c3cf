from __future__ import annotations

import logging
from typing import Any

from retrier.errors import InvalidArgumentError

FORMAT = "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "retrier:stream"

logger = logging.getLogger(__package__)
logger.addHandler(logging.NullHandler())


def resolve_level(level: Any) -> int:
    """Turn `level` into a logging level number.

    Accepts an int or a level name ("debug", "INFO", ...) or a numeric string.
    Raises InvalidArgumentError for anything else.
    """
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        levels = logging.getLevelNamesMapping()
        if name in levels:
            return levels[name]
    raise InvalidArgumentError("log_level", level, "a logging level")


def configure(level: int | str = logging.INFO) -> logging.Handler:
    """Print retrier logs to stderr at `level`.

    Until this is called the package only carries a NullHandler, so importing
    retrier stays silent. Calling it again only changes the level.
    """
    resolved = resolve_level(level)
    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return handler


def reset() -> None:
    """Drop the handler added by `configure` and hand records back to the root logger."""
    for h in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
