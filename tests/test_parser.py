from __future__ import annotations

import pytest

from meetzone.parsers.errors import FormatError
from meetzone.parsers.meeting_line_parser import MeetingLineParser


def test_extracts_date_and_time_fragments() -> None:
    fields = MeetingLineParser().parse("Wed Jun 11, 9:00am-10:30am PST")

    assert fields.date_fragment == "Wed Jun 11"
    assert fields.start_fragment == "9:00am"
    assert fields.end_fragment == "10:30am"
    assert (fields.weekday, fields.month, fields.day) == ("Wed", "Jun", "11")


def test_comma_after_date_is_optional() -> None:
    fields = MeetingLineParser().parse("Tue Sep 17 10:00am-11:30am PST")

    assert fields.date_fragment == "Tue Sep 17"
    assert fields.start_fragment == "10:00am"
    assert fields.end_fragment == "11:30am"


def test_month_and_meridiem_match_case_insensitively() -> None:
    fields = MeetingLineParser().parse("wed JUN 11, 5:00AM-8:30Pm PDT")

    assert fields.month == "JUN"
    assert fields.start_fragment == "5:00AM"
    assert fields.end_fragment == "8:30Pm"


@pytest.mark.parametrize("zone", ["PT", "PST", "PDT", "ET"])
def test_accepts_short_zone_tokens(zone: str) -> None:
    fields = MeetingLineParser().parse(f"Mon Jun 16, 1:00pm-2:30pm {zone}")

    assert fields.end_fragment == "2:30pm"


def test_unknown_month_still_extracts() -> None:
    fields = MeetingLineParser().parse("Wed Xyz 11, 9:00am-10:30am PST")

    assert fields.month == "Xyz"


def test_matches_inside_surrounding_text() -> None:
    fields = MeetingLineParser().parse("Standup: Thu Jul 3, 8:15am-8:45am PT (room 4)")

    assert fields.date_fragment == "Thu Jul 3"


@pytest.mark.parametrize(
    "line",
    [
        "not a time string",
        "",
        "Wed Jun 11, PST",
        "Wed Jun 11, 9:00am PST",
        "Wed Jun 11, 9:00 am-10:30 am PST",
        "Wed Jun 11, 9:0am-10:30am PST",
        "Wed Jun 11, 9:00am-10:30am",
        "Wed Jun 11, 9:00am-10:30am pst",
    ],
)
def test_rejects_lines_outside_grammar(line: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        MeetingLineParser().parse(line)

    assert exc_info.value.line == line
    assert str(exc_info.value) == "Invalid format"


def test_extractor_accepts_long_digit_runs_for_day_and_hour() -> None:
    long_day = MeetingLineParser().parse("Wed Jun " + "9" * 5000 + ", 9:00am-10:30am PST")
    long_hour = MeetingLineParser().parse("Wed Jun 11, 99999999999:00am-10:30am PST")

    assert long_day.day == "9" * 5000
    assert long_hour.start_fragment == "99999999999:00am"
