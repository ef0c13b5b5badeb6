"""Logging setup for the portfolioterm CLI and endpoint.

Everything the package logs goes through the ``portfolioterm`` logger:
dispatch details at DEBUG, session lifecycle at INFO, and failing
command handlers via ``logger.exception``.
"""

from __future__ import annotations

import logging
import sys

from portfolioterm.config.settings import LoggingConfig

PACKAGE_LOGGER = "portfolioterm"

# httpx logs every request at INFO; the remote REPL makes one per line.
CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Point the package logger at stderr and, optionally, a log file.

    The REPL writes the terminal itself to stdout, so log records always
    go to stderr and never interleave with command output. Handlers from
    an earlier call are closed and replaced, which keeps ``repl`` and
    ``serve`` from double-logging when settings are reloaded.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).

    Returns:
        The configured package logger.
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    package_logger.debug(
        "Logging initialized at %s level%s",
        config.level, f" (also writing to {config.file})" if config.file else "",
    )
    return package_logger
