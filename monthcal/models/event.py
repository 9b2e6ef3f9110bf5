"""Event model with Pydantic v2 validation."""

import re
import time as _time
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from monthcal.constants import DATE_FORMAT, DEFAULT_CATEGORY, DEFAULT_COLOR, TIME_FORMAT

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

EVENT_FIELDS = ("id", "title", "date", "time", "description", "category", "color")


class EventCategory(str, Enum):
    """Event category tags."""

    WORK = "work"
    PERSONAL = "personal"
    IMPORTANT = "important"


def generate_event_id() -> str:
    """Generate an id from the current epoch time in milliseconds."""
    return str(int(_time.time() * 1000))


def _coerce_date(v: Any) -> Any:
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    if isinstance(v, str):
        try:
            parsed = datetime.strptime(v, DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Invalid date format: {v!r} (expected YYYY-MM-DD)")
        # strptime accepts unpadded parts; store the canonical form
        return parsed.isoformat()
    return v


def _coerce_time(v: Any) -> Any:
    if v is None:
        return ""
    if isinstance(v, time):
        return v.strftime(TIME_FORMAT)
    if isinstance(v, str):
        v = v.strip()
        if v and not _TIME_RE.match(v):
            raise ValueError(f"Invalid time format: {v!r} (expected HH:MM)")
    return v


def _coerce_category(v: Any) -> Any:
    if v is None or v == "":
        return DEFAULT_CATEGORY
    if isinstance(v, str):
        return v.lower()
    return v


def _coerce_color(v: Any) -> Any:
    if v is None or v == "":
        return DEFAULT_COLOR
    if isinstance(v, str) and not _COLOR_RE.match(v):
        raise ValueError(f"Invalid color: {v!r} (expected hex like #3b82f6)")
    return v


class Event(BaseModel):
    """A single calendar entry.

    Optional fields that arrive empty fall back to their defaults, so
    records written by older clients (or with blank form fields) load
    without error.
    """

    id: str = Field(default_factory=generate_event_id)
    title: str
    date: str
    time: str = ""
    description: str = ""
    category: EventCategory = EventCategory.PERSONAL
    color: str = DEFAULT_COLOR

    @field_validator("id", mode="before")
    @classmethod
    def convert_id(cls, v):
        """Accept integer ids, generate one when empty."""
        if v is None or v == "":
            return generate_event_id()
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be empty")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def convert_date(cls, v):
        return _coerce_date(v)

    @field_validator("time", mode="before")
    @classmethod
    def convert_time(cls, v):
        return _coerce_time(v)

    @field_validator("description", mode="before")
    @classmethod
    def convert_description(cls, v):
        return "" if v is None else v

    @field_validator("category", mode="before")
    @classmethod
    def convert_category(cls, v):
        return _coerce_category(v)

    @field_validator("color", mode="before")
    @classmethod
    def convert_color(cls, v):
        return _coerce_color(v)

    @property
    def has_time(self) -> bool:
        return bool(self.time)

    def update(self, changes: "EventUpdate | dict") -> list[str]:
        """Apply a partial update in place.

        Only fields present in ``changes`` are touched; ``id`` never changes.

        Returns:
            Names of the fields that were applied.
        """
        if isinstance(changes, dict):
            changes = EventUpdate.model_validate(changes)
        provided = changes.model_dump(exclude_unset=True, exclude_none=True)
        if not provided:
            return []

        # Validate the merged record before touching self
        merged = Event.model_validate({**self.to_dict(), **provided})
        for field in provided:
            setattr(self, field, getattr(merged, field))
        return list(provided)

    def to_dict(self) -> dict:
        """Serialize to the storage record shape."""
        return self.model_dump(mode="json")


class EventUpdate(BaseModel):
    """Partial event data; unset fields are left unchanged."""

    title: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def convert_date(cls, v):
        return None if v is None else _coerce_date(v)

    @field_validator("time", mode="before")
    @classmethod
    def convert_time(cls, v):
        if isinstance(v, time):
            return v.strftime(TIME_FORMAT)
        return v
