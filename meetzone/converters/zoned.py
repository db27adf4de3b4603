from __future__ import annotations

import re
from datetime import datetime, tzinfo

from meetzone.converters.zones import resolve_timezone
from meetzone.core.constants import MONTHS, SOURCE_TIMEZONE
from meetzone.core.models import CivilDateTime, Meridiem, RenderedTime, ZonedInstant
from meetzone.parsers.errors import (
    AmbiguousOrInvalidLocalTime,
    InvalidDay,
    InvalidMonth,
    InvalidTime,
)

# Day tokens must fit an unsigned 32-bit integer.
MAX_DAY_DIGITS = 10
MAX_DAY_VALUE = 2**32 - 1

TIME_FRAGMENT_PATTERN = re.compile(
    r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})(?P<meridiem>am|pm)$",
    re.IGNORECASE,
)


def parse_month(month_abbrev: str) -> int:
    month = MONTHS.get(month_abbrev.strip().lower())
    if month is None:
        raise InvalidMonth(f"Invalid month: {month_abbrev!r}")
    return month


def parse_day(day: str) -> int:
    cleaned = day.strip()
    if not cleaned.isascii() or not cleaned.isdigit() or len(cleaned) > MAX_DAY_DIGITS:
        raise InvalidDay(f"Invalid day: {day[:MAX_DAY_DIGITS + 1]!r}")

    day_number = int(cleaned)
    if day_number > MAX_DAY_VALUE:
        raise InvalidDay(f"Invalid day: {day!r}")
    return day_number


def parse_time_fragment(time_fragment: str) -> tuple[int, int, Meridiem]:
    match = TIME_FRAGMENT_PATTERN.match(time_fragment.strip())
    if match is None:
        raise InvalidTime(f"Invalid time: {time_fragment!r}")

    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    if not 1 <= hour <= 12 or not 0 <= minute <= 59:
        raise InvalidTime(f"Invalid time: {time_fragment!r}")

    return hour, minute, Meridiem(match.group("meridiem").lower())


def render_time(moment: datetime) -> str:
    """Format as h:mma, e.g. 8:00am or 12:30pm."""
    hour = moment.hour % 12 or 12
    meridiem = Meridiem.AM if moment.hour < 12 else Meridiem.PM
    return f"{hour}:{moment.minute:02d}{meridiem.value}"


class ZonedConverter:
    """Resolve wall-clock fragments in the source zone and re-express them elsewhere.

    The source zone is fixed at construction. Wall-clock values that fall into a
    daylight-saving fold or gap of that zone are rejected rather than shifted.
    """

    def __init__(self, source_timezone: str = SOURCE_TIMEZONE) -> None:
        self.source_timezone = source_timezone
        self.source_tz = resolve_timezone(source_timezone)

    def resolve(
        self,
        year: int,
        month_abbrev: str,
        day: str,
        time_fragment: str,
    ) -> ZonedInstant:
        month = parse_month(month_abbrev)
        day_number = parse_day(day)
        hour12, minute, meridiem = parse_time_fragment(time_fragment)

        civil = CivilDateTime(
            year=year,
            month=month,
            day=day_number,
            hour12=hour12,
            minute=minute,
            meridiem=meridiem,
        )
        return self.localize(civil)

    def localize(self, civil: CivilDateTime) -> ZonedInstant:
        try:
            naive = datetime(civil.year, civil.month, civil.day, civil.hour24, civil.minute)
        except (ValueError, OverflowError) as exc:
            raise InvalidDay(f"Invalid day: {exc}") from exc

        earlier = naive.replace(tzinfo=self.source_tz, fold=0)
        later = naive.replace(tzinfo=self.source_tz, fold=1)
        # Offsets only differ for folds and gaps.
        if earlier.utcoffset() != later.utcoffset():
            raise AmbiguousOrInvalidLocalTime(
                f"Ambiguous or invalid datetime: {naive.isoformat(timespec='minutes')} "
                f"in {self.source_timezone}"
            )

        return ZonedInstant(civil=civil, moment=earlier)

    def convert(self, instant: ZonedInstant, target_tz: tzinfo) -> RenderedTime:
        moment = instant.moment.astimezone(target_tz)
        return RenderedTime(
            text=render_time(moment),
            zone_abbreviation=moment.tzname() or "",
            moment=moment,
        )
