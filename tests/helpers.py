from __future__ import annotations

from zoneinfo import ZoneInfo

from meetzone.core.clock import FixedClock
from meetzone.service import ConversionService

PINNED_YEAR = 2025
NEW_YORK = ZoneInfo("America/New_York")
LOS_ANGELES = ZoneInfo("America/Los_Angeles")


def pinned_service(year: int = PINNED_YEAR) -> ConversionService:
    return ConversionService(clock=FixedClock(year))
