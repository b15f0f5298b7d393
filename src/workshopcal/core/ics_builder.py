"""ICS file building for single workshop bookings."""

import logging
import random
import string
import time
from datetime import datetime
from typing import Optional

import pytz
from icalendar import Calendar, Event, vText

from workshopcal.config.constants import (
    ICS_CALSCALE,
    ICS_METHOD,
    ICS_PRODID,
    ICS_SEQUENCE,
    ICS_STATUS,
    ICS_UID_DOMAIN,
    ICS_VERSION,
)
from workshopcal.core.event_text import escape_text
from workshopcal.core.timezone_utils import TimeWindow

logger = logging.getLogger(__name__)

_UID_ALPHABET = string.digits + string.ascii_lowercase
_UID_RANDOM_LENGTH = 9


class EscapedText(vText):
    """TEXT value that already follows RFC 5545 escaping and is written as is."""

    def to_ical(self) -> bytes:
        return str(self).encode(self.encoding)


def generate_uid(domain: str = ICS_UID_DOMAIN) -> str:
    """Return a best-effort unique UID: nanosecond clock, random suffix, domain.

    Not cryptographically unique; collisions are an accepted low-probability risk.
    """
    suffix = "".join(random.choice(_UID_ALPHABET) for _ in range(_UID_RANDOM_LENGTH))
    return f"{time.time_ns()}-{suffix}@{domain}"


def build_event_ics(
    uid: str,
    stamp: datetime,
    window: TimeWindow,
    title: str,
    escaped_description: str,
    location: Optional[str] = None,
) -> str:
    """Build the text of a one-event iCalendar file.

    Properties are written in insertion order. Lines longer than 75 octets
    are folded and every line ends with CRLF.

    Args:
        uid: Unique identifier for the event.
        stamp: Aware datetime used for DTSTAMP.
        window: UTC start and end of the event.
        title: Event summary, unescaped.
        escaped_description: Description already in iCalendar TEXT form.
        location: Venue, unescaped. The LOCATION line is left out when empty.

    Returns:
        The ICS content string.
    """
    cal = _create_ics_calendar()
    event = _create_ics_event(uid, stamp, window, title, escaped_description, location)
    cal.add_component(event)

    ics_content = _format_ics_output(cal)
    logger.debug("Built ICS for %s (%d bytes)", uid, len(ics_content))
    return ics_content


def _create_ics_calendar() -> Calendar:
    """Create a new ICS calendar with standard headers."""
    cal = Calendar()
    cal.add("VERSION", ICS_VERSION)
    cal.add("PRODID", ICS_PRODID)
    cal.add("CALSCALE", ICS_CALSCALE)
    cal.add("METHOD", ICS_METHOD)
    return cal


def _create_ics_event(
    uid: str,
    stamp: datetime,
    window: TimeWindow,
    title: str,
    escaped_description: str,
    location: Optional[str],
) -> Event:
    """Create the VEVENT component with properties in their fixed order."""
    ve = Event()
    ve.add("UID", EscapedText(escape_text(uid)))

    # Same minute resolution as DTSTART/DTEND
    ve.add("DTSTAMP", stamp.astimezone(pytz.utc).replace(second=0, microsecond=0))
    ve.add("DTSTART", window.start)
    ve.add("DTEND", window.end)

    ve.add("SUMMARY", EscapedText(escape_text(title)))
    ve.add("DESCRIPTION", EscapedText(escaped_description))
    if location:
        ve.add("LOCATION", EscapedText(escape_text(location)))

    ve.add("STATUS", ICS_STATUS)
    ve.add("SEQUENCE", ICS_SEQUENCE)
    return ve


def _format_ics_output(cal: Calendar) -> str:
    """Serialize without reordering and with CRLF line endings."""
    raw_ical = cal.to_ical(sorted=False)
    decoded_ical = raw_ical.decode("utf-8")
    # Ensure CRLF line endings per RFC5545
    return decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")
