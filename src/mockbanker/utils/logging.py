"""Logging utilities.

Loggers are plain :mod:`logging` loggers living under the ``mockbanker``
namespace.  The package root carries a :class:`logging.NullHandler` so that
library use stays silent unless the application configures logging;
:func:`configure_logging` is the opt-in used by the CLI and is idempotent.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "mockbanker"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace.

    ``name`` may be a module ``__name__`` (already prefixed) or a short suffix.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set ``level``.

    Calling this repeatedly only updates the level.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(level)
    if not any(getattr(h, "_mockbanker", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._mockbanker = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
