"""Tests for the Typer CLI."""

import json
import re

import pytest
from typer.testing import CliRunner

from monthcal.constants import MSG_EVENT_ADDED, MSG_EVENT_DELETED, MSG_EVENT_UPDATED
from monthcal_cli.app import app

runner = CliRunner()


@pytest.fixture
def storage_path(tmp_path, monkeypatch):
    """Point the CLI at temporary storage and logs."""
    path = tmp_path / "storage.json"
    monkeypatch.setenv("MONTHCAL_STORAGE_PATH", str(path))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    return path


def _stored_events(path) -> list[dict]:
    return json.loads(json.loads(path.read_text())["calendarEvents"])


def _add(*args) -> str:
    result = runner.invoke(app, ["add", *args])
    assert result.exit_code == 0, result.output
    match = re.search(r"ID: (\S+)", result.output)
    assert match
    return match.group(1)


def test_add_and_list(storage_path):
    """Test adding events and listing them by date."""
    _add("2024-02-05", "Standup", "--time", "09:00")
    _add("2024-02-05", "Gym", "--time", "08:00", "--category", "important")
    _add("2024-02-05", "Birthday")

    result = runner.invoke(app, ["events", "2024-02-05"])
    assert result.exit_code == 0
    assert result.output.index("Gym") < result.output.index("Standup") < result.output.index("Birthday")
    assert "3 events" in result.output

    records = _stored_events(storage_path)
    assert {r["title"] for r in records} == {"Standup", "Gym", "Birthday"}


def test_add_reports_notification(storage_path):
    """Test the add command echoes the notification."""
    result = runner.invoke(app, ["add", "2024-02-05", "Dentist"])
    assert result.exit_code == 0
    assert MSG_EVENT_ADDED in result.output


def test_add_blank_title_fails(storage_path):
    """Test a blank title exits with an error and stores nothing."""
    result = runner.invoke(app, ["add", "2024-02-05", "   "])
    assert result.exit_code == 1
    assert not storage_path.exists()


def test_add_takes_date_before_title(storage_path):
    """Test the positional order is DATE then TITLE."""
    result = runner.invoke(app, ["add", "Dentist", "2024-02-05"])
    assert result.exit_code != 0
    assert not storage_path.exists() or _stored_events(storage_path) == []
    event_id = _add("2024-02-05", "Dentist")
    assert _stored_events(storage_path)[0]["id"] == event_id


def test_add_invalid_date(storage_path):
    """Test a malformed date is a usage error."""
    result = runner.invoke(app, ["add", "05.02.2024", "Dentist"])
    assert result.exit_code != 0


def test_show_month(storage_path):
    """Test the month grid shows the label and events."""
    _add("2024-02-05", "Dentist")
    result = runner.invoke(app, ["show", "--year", "2024", "--month", "2"])
    assert result.exit_code == 0
    assert "February 2024" in result.output
    assert "Dentist" in result.output


def test_show_offset(storage_path):
    """Test --offset steps across the year boundary."""
    result = runner.invoke(app, ["show", "-y", "2024", "-m", "12", "--offset", "1"])
    assert result.exit_code == 0
    assert "January 2025" in result.output


def test_show_outside_date_range(storage_path):
    """Test months that cannot be rendered are a usage error."""
    result = runner.invoke(app, ["show", "-y", "9999", "-m", "12"])
    assert result.exit_code == 2
    result = runner.invoke(app, ["show", "-y", "2024", "-m", "1", "--offset", "10000000"])
    assert result.exit_code == 2


def test_edit_partial(storage_path):
    """Test edit changes only the given options."""
    event_id = _add("2024-02-05", "Dentist", "--time", "09:00", "--category", "work")
    result = runner.invoke(app, ["edit", event_id, "--title", "Orthodontist"])
    assert result.exit_code == 0
    assert MSG_EVENT_UPDATED in result.output

    (record,) = _stored_events(storage_path)
    assert record["title"] == "Orthodontist"
    assert record["time"] == "09:00"
    assert record["category"] == "work"


def test_edit_unknown(storage_path):
    """Test editing an unknown id fails."""
    result = runner.invoke(app, ["edit", "missing", "--title", "X"])
    assert result.exit_code == 1


def test_delete_with_confirmation(storage_path):
    """Test delete asks for confirmation unless forced."""
    event_id = _add("2024-02-05", "Dentist")

    result = runner.invoke(app, ["delete", event_id], input="n\n")
    assert "Delete cancelled" in result.output
    assert len(_stored_events(storage_path)) == 1

    result = runner.invoke(app, ["delete", event_id], input="y\n")
    assert result.exit_code == 0
    assert MSG_EVENT_DELETED in result.output
    assert _stored_events(storage_path) == []


def test_delete_unknown_is_noop(storage_path):
    """Test deleting an unknown id succeeds without changes."""
    _add("2024-02-05", "Dentist")
    result = runner.invoke(app, ["delete", "missing", "--force"])
    assert result.exit_code == 0
    assert len(_stored_events(storage_path)) == 1
