"""Conversions between core models and Flask JSON payloads."""

from typing import Dict, List

from monthcal.forms import EventForm, FormResult
from monthcal.models.day_cell import DayCell, MonthView
from monthcal.models.event import Event


def event_to_dict(event: Event) -> Dict:
    """Event as the storage record shape."""
    return event.to_dict()


def cell_to_dict(cell: DayCell) -> Dict:
    return {
        "date": cell.date,
        "day": cell.day,
        "in_current_month": cell.in_current_month,
        "is_today": cell.is_today,
        "events": [event_to_dict(e) for e in cell.events],
    }


def month_view_to_dict(view: MonthView) -> Dict:
    """Month view with cells in display order."""
    return {
        "year": view.year,
        "month": view.month,
        "label": view.label,
        "cells": [cell_to_dict(c) for c in view.cells],
    }


def form_from_json(payload: Dict | None, base: EventForm | None = None) -> EventForm:
    """
    Build an EventForm from request JSON.

    Args:
        payload: Request body; unknown keys are ignored
        base: Existing form values that payload keys override (partial edits)

    Returns:
        EventForm
    """
    values = base.model_dump() if base is not None else {}
    for key in EventForm.model_fields:
        if payload and key in payload and payload[key] is not None:
            values[key] = str(payload[key])
    return EventForm.model_validate(values)


def form_result_to_dict(result: FormResult) -> Dict:
    body: Dict = {"ok": result.ok}
    if result.errors:
        body["errors"] = result.errors
    if result.event is not None:
        body["event"] = event_to_dict(result.event)
    return body


def events_to_list(events: List[Event]) -> List[Dict]:
    return [event_to_dict(e) for e in events]
