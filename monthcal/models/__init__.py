"""Pydantic models for monthcal."""

from monthcal.models.day_cell import DayCell, MonthView
from monthcal.models.event import Event, EventCategory, EventUpdate, generate_event_id

__all__ = [
    "DayCell",
    "Event",
    "EventCategory",
    "EventUpdate",
    "MonthView",
    "generate_event_id",
]
