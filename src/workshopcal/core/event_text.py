"""Human-readable text derived from a booking: title, description, filename."""

import enum
import logging
from decimal import Decimal
from typing import Mapping, Optional

from workshopcal.config.constants import (
    CURRENCY_SYMBOL,
    DEFAULT_ACTIVITY_LABEL,
    DESCRIPTION_CHARGE,
    DESCRIPTION_NOTES_HEADER,
    DESCRIPTION_PARTICIPANTS,
    DESCRIPTION_VENUE,
    ICS_FILENAME_TEMPLATE,
)
from workshopcal.core.booking_model import BookingRecord

logger = logging.getLogger(__name__)


class EscapeStyle(enum.Enum):
    """Line-terminator and escaping rules for a description."""

    LINK = "link"  # literal newlines, percent-encoded with the rest of the URL
    FILE = "file"  # iCalendar TEXT escaping, newlines as backslash-n


def activity_label(
    activity_type: str,
    activity_names: Mapping[str, str],
    default_label: str = DEFAULT_ACTIVITY_LABEL,
) -> str:
    """Look up the display name of an activity, falling back to a generic label."""
    label = activity_names.get(activity_type)
    if label is None:
        logger.debug("Unknown activity type %r, using %r", activity_type, default_label)
        return default_label
    return label


def derive_title(
    activity_type: str,
    host_details: Optional[str],
    activity_names: Mapping[str, str],
    default_label: str = DEFAULT_ACTIVITY_LABEL,
) -> str:
    """Build the event title: the activity label, plus the host when known."""
    label = activity_label(activity_type, activity_names, default_label)
    if host_details:
        return f"{label} - {host_details}"
    return label


def format_charge(charge: Decimal) -> str:
    """Render a charge without a trailing '.0' for whole amounts."""
    if charge == charge.to_integral_value():
        return str(charge.quantize(Decimal(1)))
    return str(charge.normalize())


def derive_description(record: BookingRecord, escape_style: EscapeStyle) -> str:
    """Build the event description from the optional booking fields.

    Lines appear in a fixed order and only for fields that are present:
    participants, per-person charge, venue, then a blank line and the notes.

    Args:
        record: The booking to describe.
        escape_style: LINK keeps raw newlines; FILE applies iCalendar TEXT
            escaping so the result can be written straight into a content line.

    Returns:
        The description text.
    """
    description = ""
    if record.participants_count is not None:
        description += DESCRIPTION_PARTICIPANTS.format(count=record.participants_count) + "\n"
    if record.per_person_charge is not None:
        description += DESCRIPTION_CHARGE.format(
            currency=CURRENCY_SYMBOL, charge=format_charge(record.per_person_charge)
        ) + "\n"
    if record.venue:
        description += DESCRIPTION_VENUE.format(venue=record.venue) + "\n"
    if record.additional_notes:
        description += f"\n{DESCRIPTION_NOTES_HEADER}\n{record.additional_notes}"

    if escape_style is EscapeStyle.FILE:
        return escape_text(description)
    return description


def escape_text(value: str) -> str:
    """Escape a value for an iCalendar TEXT property (RFC 5545 3.3.11).

    Backslashes are escaped first so that user text such as ``C:\\New`` is
    never read back as an escaped newline.
    """
    # NOTE: ORDER MATTERS!
    return value.replace("\\", "\\\\")\
                .replace(";", "\\;")\
                .replace(",", "\\,")\
                .replace("\r\n", "\n")\
                .replace("\r", "\n")\
                .replace("\n", "\\n")


def build_filename(record: BookingRecord) -> str:
    """Return the download filename, e.g. fluid_art_workshop_05_03.ics.

    Hyphens in the activity key become underscores, so keys that differ
    only by ``-`` versus ``_`` (``fluid-art`` and ``fluid_art``) share a
    filename. Activity keys are expected to use hyphens only.
    """
    return ICS_FILENAME_TEMPLATE.format(
        activity=record.activity_type.replace("-", "_"),
        date=record.event_date.replace("/", "_"),
    )
