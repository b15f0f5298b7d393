"""Core encoding logic for workshopcal."""

from workshopcal.core.booking_model import BookingRecord
from workshopcal.core.device import is_mobile_user_agent
from workshopcal.core.encoder import EventEncoder
from workshopcal.core.event_text import EscapeStyle
from workshopcal.core.timezone_utils import TimeWindow, format_utc_timestamp

__all__ = [
    "BookingRecord",
    "EventEncoder",
    "EscapeStyle",
    "TimeWindow",
    "format_utc_timestamp",
    "is_mobile_user_agent",
]
