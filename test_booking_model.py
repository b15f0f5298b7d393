from decimal import Decimal

import pytest

from workshopcal.core.booking_model import BookingRecord
from workshopcal.exceptions import InvalidBookingField, MissingRequiredField


def test_from_dict_converts_numeric_strings_and_blanks() -> None:
    record = BookingRecord.from_dict({
        "activity_type": "canvas",
        "event_date": "05/03",
        "event_time": "14:30",
        "host_details": "",
        "participants_count": "12",
        "per_person_charge": "499.50",
        "venue": "  ",
        "additional_notes": None,
    })

    assert record.host_details is None
    assert record.participants_count == 12
    assert record.per_person_charge == Decimal("499.50")
    assert record.venue is None
    assert record.additional_notes is None


def test_from_dict_accepts_native_numbers() -> None:
    record = BookingRecord.from_dict({
        "activity_type": "onesie",
        "event_date": "05/03",
        "event_time": "14:30",
        "participants_count": 8,
        "per_person_charge": 1200,
    })

    assert record.participants_count == 8
    assert record.per_person_charge == Decimal("1200")


def test_from_dict_reports_every_missing_field() -> None:
    with pytest.raises(MissingRequiredField) as excinfo:
        BookingRecord.from_dict({"activity_type": "canvas", "event_date": ""})

    assert excinfo.value.missing_fields == ["event_date", "event_time"]


@pytest.mark.parametrize("field,value", [
    ("participants_count", "twelve"),
    ("participants_count", "1.5"),
    ("per_person_charge", "free"),
    ("per_person_charge", "NaN"),
])
def test_from_dict_rejects_non_numeric_values(field: str, value: str) -> None:
    data = {"activity_type": "canvas", "event_date": "05/03", "event_time": "14:30", field: value}

    with pytest.raises(InvalidBookingField) as excinfo:
        BookingRecord.from_dict(data)
    assert excinfo.value.field_name == field


def test_to_dict_omits_absent_fields() -> None:
    record = BookingRecord(activity_type="canvas", event_date="05/03", event_time="14:30", venue="Cafe")

    assert record.to_dict() == {
        "activity_type": "canvas",
        "event_date": "05/03",
        "event_time": "14:30",
        "venue": "Cafe",
    }


def test_missing_required_fields_on_direct_construction() -> None:
    record = BookingRecord(activity_type="", event_date="05/03", event_time=" ")
    assert record.missing_required_fields() == {"activity_type", "event_time"}
