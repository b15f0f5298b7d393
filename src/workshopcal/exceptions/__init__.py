"""Custom exceptions for workshopcal."""

from workshopcal.exceptions.errors import (
    WorkshopCalendarError,
    InvalidInput,
    InvalidDateFormat,
    InvalidTimeFormat,
    MissingRequiredField,
    InvalidBookingField,
    DeliveryFailed,
)

__all__ = [
    "WorkshopCalendarError",
    "InvalidInput",
    "InvalidDateFormat",
    "InvalidTimeFormat",
    "MissingRequiredField",
    "InvalidBookingField",
    "DeliveryFailed",
]
