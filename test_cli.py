import webbrowser
from pathlib import Path

import pytest

from workshopcal.__main__ import EXIT_DELIVERY_FAILED, EXIT_INVALID_INPUT, EXIT_OK, main

BOOKING_ARGS = ["--activity", "canvas", "--date", "05/03", "--time", "14:30", "--venue", "Cafe"]


def test_print_link(capsys: pytest.CaptureFixture) -> None:
    assert main(BOOKING_ARGS + ["--print"]) == EXIT_OK

    out = capsys.readouterr().out.strip()
    assert out.startswith("https://calendar.google.com/calendar/render?")
    assert "dates=20250305T090000Z%2F20250305T110000Z" in out


def test_print_file_for_mobile_user_agent(capsys: pytest.CaptureFixture) -> None:
    assert main(BOOKING_ARGS + ["--print", "--user-agent", "Mozilla/5.0 (iPhone)"]) == EXIT_OK

    out = capsys.readouterr().out
    assert out.startswith("BEGIN:VCALENDAR")
    assert "LOCATION:Cafe" in out


def test_mobile_saves_file_to_output_dir(tmp_path: Path) -> None:
    assert main(BOOKING_ARGS + ["--mobile", "--output-dir", str(tmp_path)]) == EXIT_OK

    saved = tmp_path / "canvas_workshop_05_03.ics"
    content = saved.read_bytes()
    assert content.startswith(b"BEGIN:VCALENDAR\r\n")
    assert content.endswith(b"END:VCALENDAR\r\n")


def test_desktop_opens_browser(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = []
    monkeypatch.setattr(webbrowser, "open_new_tab", lambda url: opened.append(url) or True)

    assert main(BOOKING_ARGS) == EXIT_OK
    assert len(opened) == 1
    assert "action=TEMPLATE" in opened[0]


def test_invalid_date_exit_code(capsys: pytest.CaptureFixture) -> None:
    args = ["--activity", "canvas", "--date", "31/02", "--time", "14:30", "--print"]

    assert main(args) == EXIT_INVALID_INPUT
    assert "DD/MM" in capsys.readouterr().err


def test_invalid_participants_exit_code(capsys: pytest.CaptureFixture) -> None:
    assert main(BOOKING_ARGS + ["--participants", "many", "--print"]) == EXIT_INVALID_INPUT
    assert "number of participants" in capsys.readouterr().err


def test_browser_failure_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr(webbrowser, "open_new_tab", lambda url: False)

    assert main(BOOKING_ARGS) == EXIT_DELIVERY_FAILED
    assert "browser" in capsys.readouterr().err
