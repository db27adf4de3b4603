from __future__ import annotations

import re

from meetzone.core.models import ExtractedFields
from meetzone.parsers.errors import FormatError

# Weekday Month Day[,] h:mm(am|pm)-h:mm(am|pm) ZONE
# The zone token is only checked for shape; it never selects the source zone.
MEETING_LINE_PATTERN = re.compile(
    r"(?P<date>\w+\s+\w+\s+\d+),?\s*"
    r"(?P<start>\d+:\d{2}(?:am|pm))-(?P<end>\d+:\d{2}(?:am|pm))"
    r"\s+(?-i:[A-Z]{1,2}T)",
    re.IGNORECASE,
)


class MeetingLineParser:
    def __init__(self, pattern: re.Pattern[str] = MEETING_LINE_PATTERN) -> None:
        self.pattern = pattern

    def parse(self, line: str) -> ExtractedFields:
        match = self.pattern.search(line)
        if match is None:
            raise FormatError(line=line)

        return ExtractedFields(
            date_fragment=match.group("date"),
            start_fragment=match.group("start"),
            end_fragment=match.group("end"),
        )
