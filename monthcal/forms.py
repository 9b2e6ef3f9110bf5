"""Event form state and validation."""

from dataclasses import dataclass, field

from pydantic import BaseModel

from monthcal.constants import DEFAULT_CATEGORY, DEFAULT_COLOR, MSG_TITLE_REQUIRED
from monthcal.models.event import Event


class EventForm(BaseModel):
    """Raw values of the add/edit event form.

    An empty ``id`` means the form creates a new event.
    """

    id: str = ""
    title: str = ""
    date: str = ""
    time: str = ""
    description: str = ""
    category: str = DEFAULT_CATEGORY
    color: str = DEFAULT_COLOR

    @property
    def is_edit(self) -> bool:
        return bool(self.id)

    @classmethod
    def for_new_event(cls, date_str: str) -> "EventForm":
        """Blank form prefilled with a date and the default category/color."""
        return cls(date=date_str)

    @classmethod
    def for_event(cls, event: Event) -> "EventForm":
        """Form prefilled from an existing event."""
        return cls.model_validate(event.to_dict())

    def validate_field(self, name: str) -> str | None:
        """Validate one field as the user types; returns the error message."""
        if name == "title" and not self.title.strip():
            return MSG_TITLE_REQUIRED
        return None

    def validate(self) -> "FormResult":
        """Trim free-text fields and check required ones."""
        errors = {}
        for name in ("title",):
            message = self.validate_field(name)
            if message:
                errors[name] = message

        data = {
            "title": self.title.strip(),
            "date": self.date,
            "time": self.time,
            "description": self.description.strip(),
            "category": self.category or DEFAULT_CATEGORY,
            "color": self.color or DEFAULT_COLOR,
        }
        return FormResult(errors=errors, data=data)


@dataclass
class FormResult:
    """Outcome of validating (and possibly submitting) a form."""

    errors: dict[str, str] = field(default_factory=dict)
    data: dict = field(default_factory=dict)
    event: Event | None = None

    @property
    def ok(self) -> bool:
        return not self.errors
