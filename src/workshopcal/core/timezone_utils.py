"""Fixed-offset time conversion for booking slots."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

import pytz
from dateutil import tz as du_tz

from workshopcal.config.constants import (
    DEFAULT_EVENT_DURATION,
    IST_NAME,
    IST_OFFSET,
    UTC_TIMESTAMP_FORMAT,
)
from workshopcal.exceptions.errors import InvalidDateFormat, InvalidTimeFormat

logger = logging.getLogger(__name__)

# Fixed UTC+5:30, never DST-adjusted
IST = du_tz.tzoffset(IST_NAME, IST_OFFSET)

DATE_PATTERN = re.compile(r"([0-9]{1,2})/([0-9]{1,2})")
TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{1,2})")


@dataclass(frozen=True)
class TimeWindow:
    """UTC start and end of a booked slot."""

    start: datetime
    end: datetime

    @property
    def start_token(self) -> str:
        return format_utc_timestamp(self.start)

    @property
    def end_token(self) -> str:
        return format_utc_timestamp(self.end)

    @property
    def dates_param(self) -> str:
        """Start and end joined the way calendar links expect them."""
        return f"{self.start_token}/{self.end_token}"


def format_utc_timestamp(moment: datetime) -> str:
    """Format an aware datetime as YYYYMMDDTHHMM00Z in UTC.

    Seconds are always written as 00.

    Args:
        moment: A timezone-aware datetime.

    Returns:
        The compact UTC timestamp.
    """
    if moment.tzinfo is None:
        raise ValueError("format_utc_timestamp requires a timezone-aware datetime")
    return moment.astimezone(pytz.utc).strftime(UTC_TIMESTAMP_FORMAT)


def parse_booking_date(date_str: str):
    """Split a DD/MM string into (day, month) integers.

    Raises:
        InvalidDateFormat: If the value is not two integers in range.
    """
    if not isinstance(date_str, str):
        raise InvalidDateFormat(date_str, "not a string")
    match = DATE_PATTERN.fullmatch(date_str)
    if not match:
        raise InvalidDateFormat(date_str)
    day, month = int(match.group(1)), int(match.group(2))
    if not 1 <= day <= 31:
        raise InvalidDateFormat(date_str, f"day {day} out of range 1-31")
    if not 1 <= month <= 12:
        raise InvalidDateFormat(date_str, f"month {month} out of range 1-12")
    return day, month


def parse_booking_time(time_str: str):
    """Split an HH:MM string into (hour, minute) integers.

    Raises:
        InvalidTimeFormat: If the value is not two integers in range.
    """
    if not isinstance(time_str, str):
        raise InvalidTimeFormat(time_str, "not a string")
    match = TIME_PATTERN.fullmatch(time_str)
    if not match:
        raise InvalidTimeFormat(time_str)
    hour, minute = int(match.group(1)), int(match.group(2))
    if not 0 <= hour <= 23:
        raise InvalidTimeFormat(time_str, f"hour {hour} out of range 0-23")
    if not 0 <= minute <= 59:
        raise InvalidTimeFormat(time_str, f"minute {minute} out of range 0-59")
    return hour, minute


def derive_time_window(
    date_str: str,
    time_str: str,
    year: int,
    duration: timedelta = DEFAULT_EVENT_DURATION,
) -> TimeWindow:
    """Convert an IST booking date and time into a UTC time window.

    Args:
        date_str: Booking date as DD/MM.
        time_str: Booking start as 24-hour HH:MM, IST wall clock.
        year: Year the DD/MM date is interpreted in.
        duration: Length of the slot.

    Returns:
        TimeWindow with UTC start and end.

    Raises:
        InvalidDateFormat: If the date cannot be parsed or does not exist.
        InvalidTimeFormat: If the time cannot be parsed.
    """
    day, month = parse_booking_date(date_str)
    hour, minute = parse_booking_time(time_str)

    try:
        local_start = datetime(year, month, day, hour, minute, 0, tzinfo=IST)
    except ValueError as exc:
        # e.g. 31/04 or 29/02 outside a leap year
        raise InvalidDateFormat(date_str, str(exc)) from exc

    start_utc = local_start.astimezone(pytz.utc)
    end_utc = start_utc + duration
    logger.debug(
        "Booking %s %s IST -> %s/%s UTC",
        date_str, time_str,
        format_utc_timestamp(start_utc), format_utc_timestamp(end_utc)
    )
    return TimeWindow(start=start_utc, end=end_utc)
