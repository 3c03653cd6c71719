"""Package logging for aspectgraph.

Every module logs through ``get_logger(__name__)``; records flow to a single
stdout handler on the ``aspectgraph`` logger. The starting level comes from
the ``ASPECTGRAPH_LOG_LEVEL`` environment variable (a level name such as
``DEBUG`` or ``warning``) and falls back to INFO. The CLI maps its
``--verbose`` and ``--quiet`` flags onto levels with ``configure_cli_logging``.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = __name__.split(".")[0]
LOG_LEVEL_ENV = "ASPECTGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``ASPECTGRAPH_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default`` as well.
    """
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``aspectgraph`` logger.

    Repeated calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Logging level. Defaults to ``level_from_env()``.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_from_env() if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``aspectgraph`` hierarchy.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``aspectgraph`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def cli_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; ``verbose`` wins over ``quiet``.

    Without either flag the environment level applies.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return level_from_env()


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply ``cli_log_level`` globally and return the chosen level."""
    level = cli_log_level(verbose, quiet)
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures from scratch."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
