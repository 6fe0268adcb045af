"""Project logger for seqfn.

One handler is attached to the project logger (``settings.LOGGER_NAME``).
Modules log through children of it obtained from :func:`get_logger`, so a
single level setting controls every module and records carry the module path
in ``%(name)s``.
"""

import logging
import sys

from seqfn.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger", "project_handlers"]

_PACKAGE = "seqfn"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _ProjectHandler(logging.StreamHandler):
    """Stdout handler owned by :func:`setup_logger`."""


def project_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the handlers that :func:`setup_logger` attached to ``logger``."""
    return [h for h in logger.handlers if isinstance(h, _ProjectHandler)]


def setup_logger(
    name: str | None = None,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Calling it again for the same name returns the logger untouched, so the
    first caller decides the level and format.

    Args:
        name: Logger name (defaults to ``settings.LOGGER_NAME``)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    name = name or settings.LOGGER_NAME
    level = level or settings.LOG_LEVEL

    logger = logging.getLogger(name)
    if project_handlers(logger):
        return logger

    handler = _ProjectHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or _DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child of the project logger for a module, e.g. ``get_logger(__name__)``.

    The ``seqfn.`` package prefix is dropped, so ``seqfn.functional.sequences``
    logs as ``<LOGGER_NAME>.functional.sequences``.
    """
    suffix = module_name
    if suffix == _PACKAGE:
        return logger
    if suffix.startswith(_PACKAGE + "."):
        suffix = suffix[len(_PACKAGE) + 1 :]
    return logger.getChild(suffix)


logger = setup_logger()
