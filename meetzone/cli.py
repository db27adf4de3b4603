"""Convert meeting-time lines read from stdin into a target timezone."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO

import click

from meetzone.config import load_settings
from meetzone.converters.zones import resolve_timezone_or_default
from meetzone.core.clock import Clock
from meetzone.observability.logs import CLI_LOG_FORMAT, configure_logging
from meetzone.service import ConversionService

logger = logging.getLogger("meetzone.cli")


def _read_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield decoded lines, reporting each read or decode failure and moving on.

    Stops at EOF, or when the same read error is raised twice in a row.
    """
    last_error: str | None = None
    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            click.echo(f"Error reading input: {exc}", err=True)
            if str(exc) == last_error:
                logger.warning("Repeated read error, stopping: %s", exc)
                return
            last_error = str(exc)
            continue

        last_error = None
        if not raw:
            return

        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            click.echo(f"Error reading input: {exc}", err=True)
            continue
        yield line


def run(
    stream: BinaryIO,
    timezone_name: str | None,
    *,
    default_timezone: str,
    clock: Clock | None = None,
) -> None:
    service = ConversionService(clock=clock)
    target_tz = resolve_timezone_or_default(timezone_name, default_timezone)
    year = service.clock.current_year()
    logger.debug("Converting to %s using year %d", target_tz, year)

    for line in _read_lines(stream):
        outcome = service.convert_line(line, target_tz, year=year)
        if outcome.converted is not None:
            click.echo(outcome.converted.render())
        else:
            click.echo(f"Failed to parse '{outcome.line}': {outcome.error}", err=True)


@click.command()
@click.argument("timezone", required=False)
def main(timezone: str | None) -> None:
    """Append TIMEZONE equivalents to Pacific meeting times, e.g. "Wed Jun 11, 9:00am-10:30am PST"."""
    settings = load_settings(log_level="WARNING")
    configure_logging(settings.log_level, stream=click.get_text_stream("stderr"), fmt=CLI_LOG_FORMAT)

    run(
        click.get_binary_stream("stdin"),
        timezone,
        default_timezone=settings.default_target_timezone,
    )
