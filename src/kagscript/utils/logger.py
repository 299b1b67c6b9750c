"""Logging helpers.

Every module logs through ``get_logger(__name__)``, so all records land
under the ``kagscript`` logger. The library installs no handlers;
applications configure logging themselves or call ``enable_logging``
while debugging a script:

    >>> import sys
    >>> from kagscript.utils.logger import enable_logging
    >>> handler = enable_logging("DEBUG", stream=sys.stderr)
"""

from __future__ import annotations

import logging
from typing import TextIO

ROOT_LOGGER = "kagscript"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, placed under the ``kagscript`` namespace.

    Example:
        >>> get_logger("mymodule").name
        'kagscript.mymodule'
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def enable_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """Send kagscript records to ``stream`` (stderr by default).

    Only one handler is ever attached; later calls change its level and
    return it.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers:
        if getattr(handler, "_kagscript", False):
            break
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._kagscript = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    handler.setLevel(level)
    root.setLevel(level)
    return handler
