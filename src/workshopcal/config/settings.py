"""Runtime settings for the event encoder."""

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import dotenv_values

from workshopcal.config.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_ACTIVITY_LABEL,
    DEFAULT_ACTIVITY_NAMES,
    DEFAULT_EVENT_DURATION,
    DEFAULT_EVENT_YEAR,
    DOWNLOAD_DIR_ENV_VAR,
    EVENT_YEAR_ENV_VAR,
)

logger = logging.getLogger(__name__)


def _frozen_mapping(names: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(names))


@dataclass(frozen=True)
class EncoderSettings:
    """Deployment settings handed to EventEncoder at construction time."""

    event_year: int = DEFAULT_EVENT_YEAR
    activity_names: Mapping[str, str] = field(
        default_factory=lambda: _frozen_mapping(DEFAULT_ACTIVITY_NAMES)
    )
    default_activity_label: str = DEFAULT_ACTIVITY_LABEL
    event_duration: timedelta = DEFAULT_EVENT_DURATION
    download_dir: Optional[Path] = None

    def __post_init__(self):
        # Callers may pass a plain dict; never keep a mutable reference to it
        if not isinstance(self.activity_names, MappingProxyType):
            object.__setattr__(self, "activity_names", _frozen_mapping(self.activity_names))


def get_user_config_dir() -> Path:
    """Return a per-user config directory that works across platforms.

    Returns:
        Path to the user's config directory for this application.
    """
    if sys.platform.startswith("win"):
        base_str = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
        base = Path(base_str) if base_str else (Path.home() / "AppData" / "Roaming")
        return base / CONFIG_DIR_NAME

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / CONFIG_DIR_NAME

    base_str = os.environ.get("XDG_CONFIG_HOME")
    base = Path(base_str) if base_str else (Path.home() / ".config")
    return base / CONFIG_DIR_NAME


def get_env_file_path() -> Path:
    """Get the managed .env path under the user config directory."""
    return get_user_config_dir() / ".env"


def _read_setting(name: str, file_values: Mapping[str, Optional[str]]) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        value = file_values.get(name)
    if value is None:
        return None
    value = str(value).strip().strip("'\"").strip()
    return value or None


def _parse_event_year(raw: Optional[str]) -> int:
    if raw is None:
        return DEFAULT_EVENT_YEAR
    try:
        year = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring %s=%r (not an integer), using %d",
            EVENT_YEAR_ENV_VAR, raw, DEFAULT_EVENT_YEAR
        )
        return DEFAULT_EVENT_YEAR
    if not 1 <= year <= 9999:
        logger.warning(
            "Ignoring %s=%d (out of range), using %d",
            EVENT_YEAR_ENV_VAR, year, DEFAULT_EVENT_YEAR
        )
        return DEFAULT_EVENT_YEAR
    return year


def load_settings(env_file: Optional[Path] = None) -> EncoderSettings:
    """Build EncoderSettings from the environment and an optional .env file.

    Process environment variables win over values in the .env file. The file
    is parsed without mutating os.environ.

    Args:
        env_file: Path to a .env file (default: the per-user config .env).

    Returns:
        A populated EncoderSettings instance.
    """
    path = env_file if env_file is not None else get_env_file_path()
    file_values = dotenv_values(path) if path.exists() else {}
    if file_values:
        logger.debug("Loaded settings file %s", path)

    event_year = _parse_event_year(_read_setting(EVENT_YEAR_ENV_VAR, file_values))
    download_dir_raw = _read_setting(DOWNLOAD_DIR_ENV_VAR, file_values)
    download_dir = Path(download_dir_raw).expanduser() if download_dir_raw else None

    return EncoderSettings(event_year=event_year, download_dir=download_dir)


# Default settings instance
ENCODER_SETTINGS = EncoderSettings()
