from __future__ import annotations

import logging
from typing import TextIO

SERVER_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
CLI_LOG_FORMAT = "meetzone: %(levelname)s %(message)s"


def configure_logging(
    level: str,
    *,
    stream: TextIO | None = None,
    fmt: str = SERVER_LOG_FORMAT,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Repeated calls replace the handler, so building several apps or running the
    CLI more than once in a process does not duplicate log lines.
    """
    package_logger = logging.getLogger("meetzone")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    return package_logger
