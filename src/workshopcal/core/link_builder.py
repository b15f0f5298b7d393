"""Google Calendar template link construction."""

import logging
from urllib.parse import urlencode

from workshopcal.config.constants import GOOGLE_CALENDAR_ACTION, GOOGLE_CALENDAR_RENDER_URL
from workshopcal.core.timezone_utils import TimeWindow

logger = logging.getLogger(__name__)


def build_calendar_link(title: str, window: TimeWindow, details: str, location: str) -> str:
    """Build a link that opens Google Calendar's "create event" form pre-filled.

    Args:
        title: Event title.
        window: UTC time window of the event.
        details: Description with literal newlines.
        location: Venue, or an empty string.

    Returns:
        The full render URL with a form-encoded query string.
    """
    params = {
        "action": GOOGLE_CALENDAR_ACTION,
        "text": title,
        "dates": window.dates_param,
        "details": details,
        "location": location or "",
    }
    url = f"{GOOGLE_CALENDAR_RENDER_URL}?{urlencode(params)}"
    logger.debug("Built calendar link (%d chars)", len(url))
    return url
