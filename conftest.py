from datetime import datetime

import pytest
import pytz

from workshopcal.config.constants import DOWNLOAD_DIR_ENV_VAR, EVENT_YEAR_ENV_VAR
from workshopcal.config.settings import EncoderSettings
from workshopcal.core.booking_model import BookingRecord
from workshopcal.core.encoder import EventEncoder

FIXED_NOW = datetime(2025, 3, 1, 12, 34, 56, tzinfo=pytz.utc)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv(EVENT_YEAR_ENV_VAR, raising=False)
    monkeypatch.delenv(DOWNLOAD_DIR_ENV_VAR, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def encoder() -> EventEncoder:
    return EventEncoder(
        EncoderSettings(event_year=2025),
        clock=lambda: FIXED_NOW,
        uid_factory=lambda: "fixed-uid@event-manager",
    )


@pytest.fixture
def full_record() -> BookingRecord:
    return BookingRecord.from_dict({
        "activity_type": "fluid-art",
        "host_details": "Priya, Little Artists",
        "participants_count": "12",
        "per_person_charge": "850",
        "venue": "Studio 5, Indiranagar",
        "event_date": "05/03",
        "event_time": "14:30",
        "additional_notes": "Bring aprons; wear old clothes",
    })
