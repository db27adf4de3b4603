from __future__ import annotations

from typing import Final

SOURCE_TIMEZONE: Final[str] = "America/Los_Angeles"
DEFAULT_TARGET_TIMEZONE: Final[str] = "America/New_York"

MONTHS: Final[dict[str, int]] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

LINE_STATUS_CONVERTED: Final[str] = "converted"
