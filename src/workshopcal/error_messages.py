"""User-friendly error message handling."""

from workshopcal.exceptions.errors import (
    DeliveryFailed,
    InvalidBookingField,
    InvalidDateFormat,
    InvalidTimeFormat,
    MissingRequiredField,
)

# Readable names for booking fields
FIELD_LABELS = {
    "activity_type": "activity type",
    "event_date": "date",
    "event_time": "time",
    "participants_count": "number of participants",
    "per_person_charge": "per person charge",
}


def get_user_friendly_error(error: Exception) -> str:
    """Convert an exception to a user-friendly error message.

    Args:
        error: The exception to convert.

    Returns:
        A user-friendly error message string.
    """
    if isinstance(error, MissingRequiredField):
        labels = [FIELD_LABELS.get(name, name) for name in error.missing_fields]
        return f"Please fill in the {', '.join(labels)} before adding to calendar."

    if isinstance(error, InvalidDateFormat):
        return f"The date {error.value!r} is not valid. Use DD/MM, for example 05/03."

    if isinstance(error, InvalidTimeFormat):
        return f"The time {error.value!r} is not valid. Use 24-hour HH:MM, for example 14:30."

    if isinstance(error, InvalidBookingField):
        label = FIELD_LABELS.get(error.field_name, error.field_name)
        return f"The {label} must be a number."

    if isinstance(error, DeliveryFailed):
        if error.channel == "file":
            return "The calendar file could not be saved. Please try again."
        return "Could not open the calendar in your browser. Please try again."

    return f"An error occurred: {str(error)}"
