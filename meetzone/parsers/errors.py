from __future__ import annotations


class ConversionError(ValueError):
    kind = "conversion_error"
    default_message = "Conversion failed"

    def __init__(self, message: str | None = None, *, line: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.line = line


class FormatError(ConversionError):
    kind = "format"
    default_message = "Invalid format"


class InvalidMonth(ConversionError):
    kind = "invalid_month"
    default_message = "Invalid month"


class InvalidDay(ConversionError):
    kind = "invalid_day"
    default_message = "Invalid day"


class InvalidTime(ConversionError):
    kind = "invalid_time"
    default_message = "Invalid time"


class AmbiguousOrInvalidLocalTime(ConversionError):
    kind = "ambiguous_or_invalid_local_time"
    default_message = "Ambiguous or invalid datetime"


class UnknownTimezone(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown timezone: {name!r}")
        self.name = name
