"""Centralized constants for workshopcal.

Values that never vary between deployments live here. Anything a deployment
may want to override (event year, activity labels) lives in settings.
"""

from datetime import timedelta

# Google Calendar "render with template" endpoint
GOOGLE_CALENDAR_RENDER_URL = "https://calendar.google.com/calendar/render"
GOOGLE_CALENDAR_ACTION = "TEMPLATE"

# Bookings are entered in Indian Standard Time (UTC+5:30, no DST)
IST_NAME = "IST"
IST_OFFSET = timedelta(hours=5, minutes=30)

# Every workshop is booked as a two hour slot
DEFAULT_EVENT_DURATION = timedelta(hours=2)

# Interpretation year for DD/MM booking dates
DEFAULT_EVENT_YEAR = 2025

# UTC timestamp layout shared by link dates, DTSTART/DTEND and DTSTAMP
UTC_TIMESTAMP_FORMAT = "%Y%m%dT%H%M00Z"

# ICS calendar constants
ICS_PRODID = "-//Event Manager//Art Workshop//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_STATUS = "CONFIRMED"
ICS_SEQUENCE = 0
ICS_UID_DOMAIN = "event-manager"
ICS_MIME_TYPE = "text/calendar; charset=utf-8"
ICS_FILENAME_TEMPLATE = "{activity}_workshop_{date}.ics"

# Activity labels used for event titles
DEFAULT_ACTIVITY_NAMES = {
    "onesie": "Onesie Workshop",
    "fluid-art": "Fluid Art Workshop",
    "canvas": "Canvas Workshop",
}
DEFAULT_ACTIVITY_LABEL = "Art Workshop"

# Description lines
CURRENCY_SYMBOL = "₹"
DESCRIPTION_PARTICIPANTS = "Number of Participants: {count}"
DESCRIPTION_CHARGE = "Per Person Charge: {currency}{charge}"
DESCRIPTION_VENUE = "Venue: {venue}"
DESCRIPTION_NOTES_HEADER = "Additional Notes:"

# User agent markers that identify phones and tablets
MOBILE_USER_AGENT_MARKERS = [
    "Android",
    "webOS",
    "iPhone",
    "iPad",
    "iPod",
    "BlackBerry",
    "IEMobile",
    "Opera Mini",
]

# Environment variable names
EVENT_YEAR_ENV_VAR = "WORKSHOPCAL_EVENT_YEAR"
DOWNLOAD_DIR_ENV_VAR = "WORKSHOPCAL_DOWNLOAD_DIR"

# Per-user config directory name
CONFIG_DIR_NAME = "workshopcal"
