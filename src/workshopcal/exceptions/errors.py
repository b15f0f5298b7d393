"""Exception hierarchy for workshopcal."""

from typing import Iterable, Optional


class WorkshopCalendarError(Exception):
    """Base class for all workshopcal errors."""


class InvalidInput(WorkshopCalendarError):
    """A booking record cannot be encoded as given."""


class InvalidDateFormat(InvalidInput):
    """Booking date is not a valid DD/MM value."""

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        self.reason = reason
        message = f"Invalid booking date {value!r}: expected DD/MM"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidTimeFormat(InvalidInput):
    """Booking time is not a valid 24-hour HH:MM value."""

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        self.reason = reason
        message = f"Invalid booking time {value!r}: expected HH:MM"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredField(InvalidInput):
    """Activity type, date or time is absent."""

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = sorted(missing_fields)
        super().__init__(
            f"Booking is missing required fields: {', '.join(self.missing_fields)}"
        )


class InvalidBookingField(InvalidInput):
    """An optional numeric field holds a value that is not a number."""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Booking field {field_name} has a non-numeric value {value!r}")


class DeliveryFailed(WorkshopCalendarError):
    """The save-file or open-link collaborator could not deliver the artifact."""

    def __init__(self, channel: str, message: str):
        self.channel = channel
        super().__init__(f"Calendar {channel} delivery failed: {message}")
