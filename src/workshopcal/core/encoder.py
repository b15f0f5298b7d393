"""EventEncoder: booking record to calendar link or ICS file."""

import logging
from datetime import datetime
from typing import Callable, Optional

import pytz

from workshopcal.config.constants import ICS_MIME_TYPE
from workshopcal.config.settings import ENCODER_SETTINGS, EncoderSettings
from workshopcal.core.booking_model import BookingRecord
from workshopcal.core.event_text import (
    EscapeStyle,
    build_filename,
    derive_description,
    derive_title,
)
from workshopcal.core.ics_builder import build_event_ics, generate_uid
from workshopcal.core.link_builder import build_calendar_link
from workshopcal.core.timezone_utils import TimeWindow, derive_time_window
from workshopcal.exceptions.errors import DeliveryFailed, MissingRequiredField

logger = logging.getLogger(__name__)

FileSaver = Callable[[str, bytes, str], object]
LinkOpener = Callable[[str], object]


def _utc_now() -> datetime:
    return datetime.now(pytz.utc)


class EventEncoder:
    """Encode workshop bookings as calendar links or ICS files.

    Every method is a pure function of the booking, the settings and the
    injected clock and UID factory.
    """

    def __init__(
        self,
        settings: Optional[EncoderSettings] = None,
        clock: Callable[[], datetime] = _utc_now,
        uid_factory: Callable[[], str] = generate_uid,
    ):
        self.settings = settings or ENCODER_SETTINGS
        self.clock = clock
        self.uid_factory = uid_factory

    def derive_time_window(self, date: str, time: str) -> TimeWindow:
        return derive_time_window(
            date, time, self.settings.event_year, self.settings.event_duration
        )

    def derive_title(self, activity_type: str, host_details: Optional[str]) -> str:
        return derive_title(
            activity_type,
            host_details,
            self.settings.activity_names,
            self.settings.default_activity_label,
        )

    def derive_description(self, record: BookingRecord, escape_style: EscapeStyle) -> str:
        return derive_description(record, escape_style)

    def build_filename(self, record: BookingRecord) -> str:
        self._check_required(record)
        return build_filename(record)

    def build_service_link(self, record: BookingRecord) -> str:
        """Return the Google Calendar link for a booking.

        Raises:
            MissingRequiredField: If activity type, date or time is absent.
            InvalidDateFormat: If the date is not a valid DD/MM.
            InvalidTimeFormat: If the time is not a valid HH:MM.
        """
        self._check_required(record)
        window = self.derive_time_window(record.event_date, record.event_time)
        return build_calendar_link(
            title=self.derive_title(record.activity_type, record.host_details),
            window=window,
            details=self.derive_description(record, EscapeStyle.LINK),
            location=record.venue or "",
        )

    def build_file_artifact(self, record: BookingRecord) -> str:
        """Return the ICS file text for a booking.

        Raises:
            MissingRequiredField: If activity type, date or time is absent.
            InvalidDateFormat: If the date is not a valid DD/MM.
            InvalidTimeFormat: If the time is not a valid HH:MM.
        """
        self._check_required(record)
        window = self.derive_time_window(record.event_date, record.event_time)
        return build_event_ics(
            uid=self.uid_factory(),
            stamp=self.clock(),
            window=window,
            title=self.derive_title(record.activity_type, record.host_details),
            escaped_description=self.derive_description(record, EscapeStyle.FILE),
            location=record.venue,
        )

    def dispatch(
        self,
        record: BookingRecord,
        is_mobile_like: bool,
        save_file: FileSaver,
        open_url: LinkOpener,
    ) -> None:
        """Produce one artifact and hand it to one delivery collaborator.

        Mobile-like devices get a downloadable ICS file, everything else gets
        the web link. Encoding errors are raised before anything is delivered.

        Args:
            record: The booking to add to a calendar.
            is_mobile_like: Whether the caller runs on a phone or tablet.
            save_file: Called as save_file(filename, content_bytes, mime_type).
            open_url: Called as open_url(url).

        Raises:
            InvalidInput: If the booking cannot be encoded.
            DeliveryFailed: If the collaborator raises.
        """
        if is_mobile_like:
            content = self.build_file_artifact(record).encode("utf-8")
            filename = build_filename(record)
            logger.info("Delivering %s as a downloadable file", filename)
            self._deliver("file", save_file, filename, content, ICS_MIME_TYPE)
        else:
            url = self.build_service_link(record)
            logger.info("Delivering %s booking as a calendar link", record.activity_type)
            self._deliver("link", open_url, url)

    @staticmethod
    def _deliver(channel: str, collaborator: Callable, *args) -> None:
        try:
            collaborator(*args)
        except DeliveryFailed:
            logger.error("Calendar %s delivery failed", channel)
            raise
        except Exception as e:
            logger.error("Calendar %s delivery failed: %s", channel, e)
            raise DeliveryFailed(channel, str(e) or type(e).__name__) from e

    @staticmethod
    def _check_required(record: BookingRecord) -> None:
        missing = record.missing_required_fields()
        if missing:
            raise MissingRequiredField(missing)
