from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import tzinfo
from time import perf_counter

from meetzone.converters.zoned import ZonedConverter
from meetzone.converters.zones import resolve_timezone
from meetzone.core.clock import Clock, SystemClock
from meetzone.core.constants import LINE_STATUS_CONVERTED
from meetzone.core.models import ConvertedRange, LineOutcome
from meetzone.observability.metrics import Metrics
from meetzone.parsers.base import LineParser
from meetzone.parsers.errors import ConversionError
from meetzone.parsers.meeting_line_parser import MeetingLineParser

logger = logging.getLogger("meetzone.service")


class ConversionService:
    def __init__(
        self,
        *,
        parser: LineParser | None = None,
        converter: ZonedConverter | None = None,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self.parser = parser or MeetingLineParser()
        self.converter = converter or ZonedConverter()
        self.clock = clock or SystemClock()
        self.metrics = metrics

    def convert_range(
        self,
        line: str,
        target_tz: tzinfo | str,
        *,
        year: int | None = None,
    ) -> ConvertedRange:
        if isinstance(target_tz, str):
            target_tz = resolve_timezone(target_tz)
        if year is None:
            year = self.clock.current_year()

        try:
            fields = self.parser.parse(line)
            start = self.converter.resolve(year, fields.month, fields.day, fields.start_fragment)
            end = self.converter.resolve(year, fields.month, fields.day, fields.end_fragment)
        except ConversionError as exc:
            exc.line = line
            raise

        start_rendered = self.converter.convert(start, target_tz)
        end_rendered = self.converter.convert(end, target_tz)

        return ConvertedRange(
            original_line=line,
            start_in_target=start_rendered.text,
            end_in_target=end_rendered.text,
            target_tz_abbreviation=start_rendered.zone_abbreviation,
        )

    def convert_time(
        self,
        line: str,
        target_tz: tzinfo | str,
        *,
        year: int | None = None,
    ) -> str:
        return self.convert_range(line, target_tz, year=year).render()

    def convert_line(self, line: str, target_tz: tzinfo, *, year: int) -> LineOutcome:
        line = line.rstrip("\r\n")
        timer_start = perf_counter()
        try:
            converted = self.convert_range(line, target_tz, year=year)
        except ConversionError as exc:
            logger.debug("Failed to convert %r: %s", line, exc)
            self._observe(exc.kind, timer_start)
            return LineOutcome(line=line, error=exc)

        self._observe(LINE_STATUS_CONVERTED, timer_start)
        return LineOutcome(line=line, converted=converted)

    def convert_lines(self, lines: Iterable[str], target_tz: tzinfo | str) -> Iterator[LineOutcome]:
        if isinstance(target_tz, str):
            target_tz = resolve_timezone(target_tz)
        year = self.clock.current_year()

        for line in lines:
            yield self.convert_line(line, target_tz, year=year)

    def _observe(self, status: str, timer_start: float) -> None:
        if self.metrics is None:
            return
        self.metrics.mark_line_status(status)
        self.metrics.conversion_duration_seconds.observe(perf_counter() - timer_start)


def convert_time(line: str, target_tz: tzinfo | str) -> str:
    return ConversionService().convert_time(line, target_tz)
