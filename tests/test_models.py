"""Tests for Pydantic models."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from monthcal.models import DayCell, Event, EventCategory, EventUpdate


def test_event_creation():
    """Test basic event creation."""
    event = Event(
        id="1",
        title="Dentist",
        date="2024-02-05",
        time="09:30",
        description="Checkup",
        category="work",
        color="#ef4444",
    )
    assert event.title == "Dentist"
    assert event.date == "2024-02-05"
    assert event.time == "09:30"
    assert event.category == EventCategory.WORK
    assert event.has_time is True


def test_event_defaults():
    """Test optional fields default like the storage format expects."""
    event = Event(title="Dentist", date="2024-02-05")
    assert event.id.isdigit()
    assert event.time == ""
    assert event.description == ""
    assert event.category == EventCategory.PERSONAL
    assert event.color == "#3b82f6"
    assert event.has_time is False


def test_event_empty_values_fall_back_to_defaults():
    """Test empty/None optional values are replaced by defaults."""
    event = Event(
        id="", title="Dentist", date="2024-02-05", time=None, category="", color=None
    )
    assert event.id
    assert event.time == ""
    assert event.category == EventCategory.PERSONAL
    assert event.color == "#3b82f6"


def test_event_date_and_time_objects():
    """Test date/time objects are converted to strings."""
    event = Event(title="Dentist", date=date(2024, 2, 5), time=time(8, 5))
    assert event.date == "2024-02-05"
    assert event.time == "08:05"


def test_event_date_is_normalized():
    """Test unpadded dates are stored zero-padded."""
    assert Event(title="X", date="2024-2-5").date == "2024-02-05"


@pytest.mark.parametrize(
    "field,value",
    [
        ("title", ""),
        ("title", "   "),
        ("date", "05/02/2024"),
        ("date", "2024-02-30"),
        ("time", "9am"),
        ("time", "24:00"),
        ("category", "holiday"),
        ("color", "blue"),
    ],
)
def test_event_validation_errors(field, value):
    """Test invalid values are rejected."""
    data = {"title": "Dentist", "date": "2024-02-05", field: value}
    with pytest.raises(ValidationError):
        Event(**data)


def test_event_update_partial():
    """Test update applies only provided fields and never the id."""
    event = Event(id="1", title="Dentist", date="2024-02-05", category="work")
    applied = event.update({"title": "Orthodontist", "id": "999"})
    assert applied == ["title"]
    assert event.id == "1"
    assert event.title == "Orthodontist"
    assert event.date == "2024-02-05"
    assert event.category == EventCategory.WORK


def test_event_update_with_model():
    """Test update accepts an EventUpdate."""
    event = Event(id="1", title="Dentist", date="2024-02-05")
    event.update(EventUpdate(date="2024-02-06", time="10:00"))
    assert event.date == "2024-02-06"
    assert event.time == "10:00"


def test_event_update_nothing():
    """Test an empty update is a no-op."""
    event = Event(id="1", title="Dentist", date="2024-02-05")
    assert event.update({}) == []
    assert event.title == "Dentist"


def test_event_to_dict():
    """Test serialization uses plain strings."""
    event = Event(id="1", title="Dentist", date="2024-02-05", category="important")
    assert event.to_dict() == {
        "id": "1",
        "title": "Dentist",
        "date": "2024-02-05",
        "time": "",
        "description": "",
        "category": "important",
        "color": "#3b82f6",
    }


def test_day_cell_defaults():
    """Test day cells start without events."""
    cell = DayCell(date="2024-02-05", day=5, in_current_month=True)
    assert cell.is_today is False
    assert cell.events == []
