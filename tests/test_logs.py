from __future__ import annotations

import io
import logging

from meetzone.observability.logs import CLI_LOG_FORMAT, configure_logging


def test_configure_logging_uses_requested_format_and_level() -> None:
    buffer = io.StringIO()

    package_logger = configure_logging("warning", stream=buffer, fmt=CLI_LOG_FORMAT)
    logging.getLogger("meetzone.zones").info("hidden")
    logging.getLogger("meetzone.zones").warning("Unknown timezone %r", "Nowhere")

    assert package_logger.level == logging.WARNING
    assert buffer.getvalue() == "meetzone: WARNING Unknown timezone 'Nowhere'\n"


def test_configure_logging_replaces_previous_handler() -> None:
    first, second = io.StringIO(), io.StringIO()

    configure_logging("INFO", stream=first)
    package_logger = configure_logging("INFO", stream=second, fmt="%(message)s")
    logging.getLogger("meetzone.service").info("converted")

    assert len(package_logger.handlers) == 1
    assert first.getvalue() == ""
    assert second.getvalue() == "converted\n"
