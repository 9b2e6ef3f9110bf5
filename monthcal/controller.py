"""UI-agnostic handling of user intents."""

import logging
from datetime import date

import pydantic

from monthcal.calendar_grid import render_month_view
from monthcal.constants import MSG_EVENT_ADDED, MSG_EVENT_DELETED, MSG_EVENT_UPDATED
from monthcal.event_store import EventStore
from monthcal.forms import EventForm, FormResult
from monthcal.models.day_cell import MonthView
from monthcal.navigation import MonthCursor
from monthcal.notification import Notifier

logger = logging.getLogger(__name__)


def _field_errors(error: pydantic.ValidationError) -> dict[str, str]:
    """Map pydantic errors to {field: message}, first message per field."""
    errors: dict[str, str] = {}
    for item in error.errors():
        name = str(item["loc"][0]) if item["loc"] else "__root__"
        errors.setdefault(name, item["msg"])
    return errors


class CalendarController:
    """Translate user intents into store mutations and rendered months.

    Adapters (web, CLI) call these methods and display what they return;
    nothing here knows about the presentation layer.
    """

    def __init__(
        self,
        store: EventStore,
        notifier: Notifier | None = None,
        cursor: MonthCursor | None = None,
    ):
        self.store = store
        self.notifier = notifier or store.notifier or Notifier()
        if store.notifier is None:
            store.notifier = self.notifier
        self.cursor = cursor or MonthCursor()

    def view(self, today: date | None = None) -> MonthView:
        """Render the month under the cursor."""
        return render_month_view(self.cursor.year, self.cursor.month, self.store, today=today)

    def navigate(self, delta: int) -> MonthView:
        self.cursor.navigate(delta)
        return self.view()

    def go_to_today(self, today: date | None = None) -> MonthView:
        self.cursor.go_to_today(today)
        return self.view(today=today)

    def new_event_form(self, date_str: str) -> EventForm:
        """Intent: the user clicked an empty part of a day cell."""
        return EventForm.for_new_event(date_str)

    def edit_event_form(self, event_id: str) -> EventForm | None:
        """Intent: the user clicked an event. None if it no longer exists."""
        event = self.store.get(event_id)
        if event is None:
            return None
        return EventForm.for_event(event)

    def submit(self, form: EventForm) -> FormResult:
        """Validate the form and add or update the event.

        On any validation error nothing is mutated and the errors are
        returned for field-level display.
        """
        result = form.validate()
        if not result.ok:
            logger.debug(f"Form rejected: {result.errors}")
            return result

        try:
            if form.is_edit:
                result.event = self.store.update(form.id, result.data)
                if result.event is not None:
                    self.notifier.show(MSG_EVENT_UPDATED)
            else:
                result.event = self.store.add(result.data)
                self.notifier.show(MSG_EVENT_ADDED)
        except pydantic.ValidationError as e:
            result.errors = _field_errors(e)
            logger.debug(f"Form rejected: {result.errors}")
        return result

    def delete(self, event_id: str) -> bool:
        """Intent: delete confirmed by the user."""
        if not event_id:
            return False
        removed = self.store.remove(event_id)
        self.notifier.show(MSG_EVENT_DELETED)
        return removed

    def close(self) -> None:
        self.notifier.close()
        self.store.close()
