from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from meetzone.parsers.errors import ConversionError


class Meridiem(str, Enum):
    AM = "am"
    PM = "pm"


@dataclass(frozen=True)
class ExtractedFields:
    date_fragment: str
    start_fragment: str
    end_fragment: str

    @property
    def weekday(self) -> str:
        return self.date_fragment.split()[0]

    @property
    def month(self) -> str:
        return self.date_fragment.split()[1]

    @property
    def day(self) -> str:
        return self.date_fragment.split()[2]


@dataclass(frozen=True)
class CivilDateTime:
    year: int
    month: int
    day: int
    hour12: int
    minute: int
    meridiem: Meridiem

    @property
    def hour24(self) -> int:
        hour = self.hour12 % 12
        return hour + 12 if self.meridiem is Meridiem.PM else hour


@dataclass(frozen=True)
class ZonedInstant:
    civil: CivilDateTime
    moment: datetime


@dataclass(frozen=True)
class RenderedTime:
    text: str
    zone_abbreviation: str
    moment: datetime


@dataclass(frozen=True)
class ConvertedRange:
    original_line: str
    start_in_target: str
    end_in_target: str
    target_tz_abbreviation: str

    def render(self) -> str:
        return (
            f"{self.original_line} "
            f"({self.start_in_target}-{self.end_in_target} {self.target_tz_abbreviation})"
        )


@dataclass(frozen=True)
class LineOutcome:
    line: str
    converted: ConvertedRange | None = None
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.converted is not None
