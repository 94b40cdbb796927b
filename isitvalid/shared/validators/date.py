"""Calendar date validation for three fixed textual formats."""

import calendar
import logging
import re
from enum import StrEnum

from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Outcome, Success, fail

logger = logging.getLogger(__name__)


class DateFormat(StrEnum):
    """Supported date formats.

    YYYY_MM_DD: ISO ordering with dashes (2024-01-31).
    MM_DD_YYYY: US ordering with slashes (01/31/2024).
    DD_MM_YYYY: European ordering with slashes (31/01/2024).
    """

    YYYY_MM_DD = "YYYY-MM-DD"
    MM_DD_YYYY = "MM/DD/YYYY"
    DD_MM_YYYY = "DD/MM/YYYY"


# Shape and positional field order (year, month, day indexes into the match groups)
_LAYOUTS: dict[DateFormat, tuple[re.Pattern[str], tuple[int, int, int]]] = {
    DateFormat.YYYY_MM_DD: (re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII), (0, 1, 2)),
    DateFormat.MM_DD_YYYY: (re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII), (2, 0, 1)),
    DateFormat.DD_MM_YYYY: (re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII), (2, 1, 0)),
}


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year`` (proleptic Gregorian).

    Unlike calendar.monthrange this accepts any year, including 0.
    """
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def validate_date(date: str, format: DateFormat | str) -> Outcome[str]:
    """Validate a date string against one of the supported formats.

    The fields are read positionally from the declared format; "01/12/2024" is
    January 12th as MM/DD/YYYY and December 1st as DD/MM/YYYY.

    Args:
        date: Date string to validate
        format: A DateFormat or its literal token, e.g. "YYYY-MM-DD"

    Returns:
        Success with the original string, or Failure with the reason

    """
    try:
        date_format = DateFormat(format)
    except ValueError:
        return fail(FailureKind.UNSUPPORTED, f"Unsupported date format: {format}", logger)

    shape, (year_index, month_index, day_index) = _LAYOUTS[date_format]
    match = shape.fullmatch(date)
    if match is None:
        return fail(FailureKind.FORMAT, f"Date must match the {date_format} format", logger)

    fields = [int(group) for group in match.groups()]
    year, month, day = fields[year_index], fields[month_index], fields[day_index]

    if not 1 <= month <= 12:
        return fail(FailureKind.RANGE, f"Month must be between 1 and 12, got {month}", logger)

    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        return fail(FailureKind.RANGE, f"Day must be between 1 and {last_day}, got {day}", logger)

    return Success(value=date)


def is_valid_date(date: str, format: DateFormat | str) -> bool:
    """Boolean projection of validate_date."""
    return validate_date(date, format).to_bool()


__all__ = ["DateFormat", "days_in_month", "is_valid_date", "validate_date"]
