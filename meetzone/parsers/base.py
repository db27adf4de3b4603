from __future__ import annotations

from typing import Protocol

from meetzone.core.models import ExtractedFields


class LineParser(Protocol):
    def parse(self, line: str) -> ExtractedFields:
        """Extract the date and time-range fragments from a free-form line."""
