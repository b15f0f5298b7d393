"""Configuration module for workshopcal."""

from workshopcal.config.settings import (
    ENCODER_SETTINGS,
    EncoderSettings,
    get_user_config_dir,
    load_settings,
)
from workshopcal.config.constants import (
    DEFAULT_ACTIVITY_LABEL,
    DEFAULT_ACTIVITY_NAMES,
    DEFAULT_EVENT_YEAR,
    GOOGLE_CALENDAR_RENDER_URL,
    ICS_MIME_TYPE,
    ICS_PRODID,
)

__all__ = [
    "ENCODER_SETTINGS",
    "EncoderSettings",
    "get_user_config_dir",
    "load_settings",
    "DEFAULT_ACTIVITY_LABEL",
    "DEFAULT_ACTIVITY_NAMES",
    "DEFAULT_EVENT_YEAR",
    "GOOGLE_CALENDAR_RENDER_URL",
    "ICS_MIME_TYPE",
    "ICS_PRODID",
]
