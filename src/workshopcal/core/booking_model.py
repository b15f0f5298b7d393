"""Booking record data model."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, FrozenSet, Optional

from workshopcal.exceptions.errors import InvalidBookingField, MissingRequiredField


def _clean_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class BookingRecord:
    """A single workshop booking as stored by the booking form."""

    activity_type: str
    event_date: str
    event_time: str
    host_details: Optional[str] = None
    participants_count: Optional[int] = None
    per_person_charge: Optional[Decimal] = None
    venue: Optional[str] = None
    additional_notes: Optional[str] = None

    # Fields without which no calendar entry can be produced
    REQUIRED_FIELDS = frozenset({"activity_type", "event_date", "event_time"})

    def missing_required_fields(self) -> FrozenSet[str]:
        """Return the names of required fields that are absent or blank."""
        return frozenset(
            name for name in self.REQUIRED_FIELDS
            if not _clean_text(getattr(self, name))
        )

    @classmethod
    def from_dict(cls, data: Dict) -> "BookingRecord":
        """Create a BookingRecord from a database row or form payload.

        Empty strings in optional fields are treated as absent, and numeric
        fields may arrive as strings.

        Args:
            data: Dictionary keyed by the booking column names.

        Returns:
            A BookingRecord instance.

        Raises:
            MissingRequiredField: If activity type, date or time is absent.
            InvalidBookingField: If participants or charge is not numeric.
        """
        missing = {name for name in cls.REQUIRED_FIELDS if not _clean_text(data.get(name))}
        if missing:
            raise MissingRequiredField(missing)

        return cls(
            activity_type=_clean_text(data["activity_type"]),
            event_date=_clean_text(data["event_date"]),
            event_time=_clean_text(data["event_time"]),
            host_details=_clean_text(data.get("host_details")),
            participants_count=_parse_count(data.get("participants_count")),
            per_person_charge=_parse_charge(data.get("per_person_charge")),
            venue=_clean_text(data.get("venue")),
            additional_notes=_clean_text(data.get("additional_notes")),
        )

    def to_dict(self) -> Dict:
        """Convert back to a dictionary, leaving out absent optional fields."""
        result = {
            "activity_type": self.activity_type,
            "event_date": self.event_date,
            "event_time": self.event_time,
        }
        optional = {
            "host_details": self.host_details,
            "participants_count": self.participants_count,
            "per_person_charge": self.per_person_charge,
            "venue": self.venue,
            "additional_notes": self.additional_notes,
        }
        result.update({key: value for key, value in optional.items() if value is not None})
        return result


def _parse_count(value) -> Optional[int]:
    text = _clean_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        raise InvalidBookingField("participants_count", value) from None


def _parse_charge(value) -> Optional[Decimal]:
    text = _clean_text(value)
    if text is None:
        return None
    try:
        charge = Decimal(text)
    except InvalidOperation:
        raise InvalidBookingField("per_person_charge", value) from None
    if not charge.is_finite():
        raise InvalidBookingField("per_person_charge", value)
    return charge
