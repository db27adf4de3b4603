from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def current_year(self) -> int:
        """Calendar year used for dates that carry no year of their own."""


class SystemClock:
    def current_year(self) -> int:
        return datetime.now(tz=timezone.utc).year


class FixedClock:
    def __init__(self, year: int) -> None:
        self.year = year

    def current_year(self) -> int:
        return self.year
