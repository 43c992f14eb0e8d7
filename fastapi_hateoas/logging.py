"""Package-local logging utilities.

The package is a library first: it emits no logs unless the host
application configures logging. Applications can opt in with
:func:`configure_logging` or the ``HATEOAS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "fastapi_hateoas"
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the package logger.

    The level comes from ``level`` or, when omitted, from ``HATEOAS_LOG_LEVEL``
    through the package settings, so invalid names raise ``SettingsError``.
    Without a level the package logger is reset to a silent ``NullHandler``.
    """
    # imported here: config logs through this module
    from fastapi_hateoas.config import load_settings

    settings = load_settings() if level is None else load_settings(log_level=level)
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Reset handlers so repeated calls do not stack stream handlers.
    pkg_logger.handlers = []

    if settings.log_level is None:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = True
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(settings.logging_level)
    pkg_logger.propagate = False
