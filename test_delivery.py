import os
import webbrowser
from pathlib import Path

import pytest

from workshopcal.config.constants import ICS_MIME_TYPE
from workshopcal.core.delivery import DirectorySaver, open_in_browser
from workshopcal.exceptions import DeliveryFailed

ICS_BYTES = b"BEGIN:VCALENDAR\r\nEND:VCALENDAR\r\n"


def test_directory_saver_writes_file(tmp_path: Path) -> None:
    saver = DirectorySaver(tmp_path / "downloads")

    target = saver("canvas_workshop_05_03.ics", ICS_BYTES, ICS_MIME_TYPE)

    assert target == tmp_path / "downloads" / "canvas_workshop_05_03.ics"
    assert target.read_bytes() == ICS_BYTES
    assert os.listdir(tmp_path / "downloads") == ["canvas_workshop_05_03.ics"]


def test_directory_saver_overwrites_existing_file(tmp_path: Path) -> None:
    (tmp_path / "canvas_workshop_05_03.ics").write_bytes(b"old")

    DirectorySaver(tmp_path)("canvas_workshop_05_03.ics", ICS_BYTES, ICS_MIME_TYPE)

    assert (tmp_path / "canvas_workshop_05_03.ics").read_bytes() == ICS_BYTES


def test_directory_saver_removes_staged_file_when_move_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_replace(src, dst):
        raise OSError("read-only target")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError):
        DirectorySaver(tmp_path)("canvas_workshop_05_03.ics", ICS_BYTES, ICS_MIME_TYPE)

    assert os.listdir(tmp_path) == []


def test_directory_saver_rejects_path_components(tmp_path: Path) -> None:
    with pytest.raises(DeliveryFailed):
        DirectorySaver(tmp_path)("../escape.ics", ICS_BYTES, ICS_MIME_TYPE)


def test_open_in_browser_uses_new_tab(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = []
    monkeypatch.setattr(webbrowser, "open_new_tab", lambda url: opened.append(url) or True)

    open_in_browser("https://calendar.google.com/calendar/render?action=TEMPLATE")

    assert opened == ["https://calendar.google.com/calendar/render?action=TEMPLATE"]


def test_open_in_browser_raises_when_no_browser(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(webbrowser, "open_new_tab", lambda url: False)

    with pytest.raises(DeliveryFailed) as excinfo:
        open_in_browser("https://calendar.google.com/calendar/render")
    assert excinfo.value.channel == "link"
