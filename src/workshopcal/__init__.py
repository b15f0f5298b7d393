"""
workshopcal - Calendar invites for art-workshop bookings

Turns a workshop booking into a Google Calendar link or a downloadable
iCalendar file, picking the right one for the user's device.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from workshopcal.config.settings import ENCODER_SETTINGS, EncoderSettings, load_settings
from workshopcal.exceptions.errors import (
    DeliveryFailed,
    InvalidDateFormat,
    InvalidInput,
    InvalidTimeFormat,
    MissingRequiredField,
    WorkshopCalendarError,
)
from workshopcal.core.booking_model import BookingRecord
from workshopcal.core.device import is_mobile_user_agent
from workshopcal.core.encoder import EventEncoder
from workshopcal.core.event_text import EscapeStyle

__all__ = [
    # Version
    "__version__",
    # Config
    "ENCODER_SETTINGS",
    "EncoderSettings",
    "load_settings",
    # Exceptions
    "WorkshopCalendarError",
    "InvalidInput",
    "InvalidDateFormat",
    "InvalidTimeFormat",
    "MissingRequiredField",
    "DeliveryFailed",
    # Core
    "BookingRecord",
    "EventEncoder",
    "EscapeStyle",
    "is_mobile_user_agent",
]
