"""Date and time extraction rules."""

import datetime as dt
import re

from ..models import ParsedTime
from .base import ExtractionRule, first_match


class DateRule(ExtractionRule[dt.date]):
    """Matches a date layout and normalises it; calendar-invalid dates are skipped."""

    field = "transaction_date"

    def __init__(self, rule_id: str, pattern: str) -> None:
        self.rule_id = rule_id
        self._regex = re.compile(pattern)

    def extract(self, text: str) -> dt.date | None:
        for match in self._regex.finditer(text):
            try:
                return dt.date(
                    int(match.group("year")), int(match.group("month")), int(match.group("day"))
                )
            except ValueError:
                continue
        return None


class TimeRule(ExtractionRule[ParsedTime]):
    """Matches HH:MM[:SS] with an optional AM/PM suffix."""

    rule_id = "clock_time"
    field = "time"

    _regex = re.compile(
        r"(?<![\d:])(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?(?![\d:])"
        r"(?:\s*(?P<period>[AaPp]\.?[Mm]\b\.?))?"
    )

    def extract(self, text: str) -> ParsedTime | None:
        for match in self._regex.finditer(text):
            parsed = self._normalise(match)
            if parsed is not None:
                return parsed
        return None

    @staticmethod
    def _normalise(match: re.Match) -> ParsedTime | None:
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        period = match.group("period")
        if minute > 59 or second > 59:
            return None
        if hour > 23:
            return None
        # A marker on a 24-hour reading ("14:30 PM") is redundant; keep the hour
        if period and 1 <= hour <= 12:
            is_pm = period[0].upper() == "P"
            hour = hour % 12 + (12 if is_pm else 0)
        value = dt.time(hour, minute, second)
        return ParsedTime(display=format_display_time(value), value=value)


def format_display_time(value: dt.time) -> str:
    """Render a time as "H:MM AM/PM" (12-hour clock, no leading zero)."""
    display_hour = value.hour % 12 or 12
    period = "PM" if value.hour >= 12 else "AM"
    return f"{display_hour}:{value.minute:02d} {period}"


DATE_RULES: list[DateRule] = [
    DateRule("iso_date", r"(?<!\d)(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})(?!\d)"),
    DateRule("day_first_dashed", r"(?<!\d)(?P<day>\d{2})-(?P<month>\d{2})-(?P<year>\d{4})(?!\d)"),
    DateRule("day_first_slashed", r"(?<!\d)(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4})(?!\d)"),
]

TIME_RULES: list[TimeRule] = [TimeRule()]


def extract_date(text: str) -> dt.date | None:
    return first_match(DATE_RULES, text)[0]


def extract_time(text: str) -> ParsedTime | None:
    return first_match(TIME_RULES, text)[0]
