"""Event store: owns all events and flushes them to key-value storage."""

import json
import logging
from typing import Iterator

from monthcal.constants import MSG_LOAD_FAILED, MSG_SAVE_FAILED, STORAGE_KEY
from monthcal.exceptions import StorageError
from monthcal.models.event import Event, EventUpdate, generate_event_id
from monthcal.notification import Notifier
from monthcal.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)


class EventStore:
    """Ordered collection of events persisted under a single storage key.

    The whole collection is serialized and written after every mutation.
    Storage failures never propagate: they are logged, reported once via
    the notifier, and the store keeps working from memory. Callers only
    ever receive copies of the stored events.

    Usage:
        with EventStore(MemoryStorage()) as store:
            store.add({"title": "Standup", "date": "2024-02-05"})
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = STORAGE_KEY,
        notifier: Notifier | None = None,
    ):
        """Initialize store.

        Args:
            storage: Key-value backend (dependency injection)
            storage_key: Slot holding the serialized events
            notifier: Receives user-visible storage error messages
        """
        self.storage = storage
        self.storage_key = storage_key
        self.notifier = notifier
        self._events: list[Event] = []

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────

    def open(self) -> "EventStore":
        """Hydrate from storage. Returns self for chaining."""
        self.hydrate()
        return self

    def close(self) -> None:
        """Drop the in-memory collection. Storage is already up to date."""
        self._events = []

    def __enter__(self) -> "EventStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.all())

    def __contains__(self, event_id: object) -> bool:
        return self._find(str(event_id)) is not None

    def all(self) -> list[Event]:
        """Copies of all events in store order."""
        return [event.model_copy() for event in self._events]

    def get(self, event_id: str) -> Event | None:
        """Copy of the event with event_id, or None."""
        event = self._find(event_id)
        return event.model_copy() if event is not None else None

    def find_by_date(self, date_str: str) -> list[Event]:
        """Copies of events whose date equals date_str exactly, in store order."""
        return [event.model_copy() for event in self._events if event.date == date_str]

    # ─────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────

    def add(self, data: dict | Event) -> Event:
        """Create an event from data, append it and persist.

        A missing id is generated; an id already taken in the store is
        replaced by a fresh one.
        """
        event = data.model_copy() if isinstance(data, Event) else Event.model_validate(data)
        if self._find(event.id) is not None:
            new_id = self._unique_id(generate_event_id())
            logger.warning(f"Event id {event.id} already in use, assigned {new_id}")
            event.id = new_id
        self._events.append(event)
        logger.info(f"Added event {event.id} '{event.title}' on {event.date}")
        self.persist()
        return event.model_copy()

    def update(self, event_id: str, changes: dict | EventUpdate) -> Event | None:
        """Apply a partial update to the event with event_id and persist.

        Returns the updated event, or None (without persisting) when no
        event has that id.
        """
        event = self._find(event_id)
        if event is None:
            logger.debug(f"Update ignored, no event {event_id}")
            return None
        fields = event.update(changes)
        logger.info(f"Updated event {event_id} fields: {', '.join(fields) or 'none'}")
        self.persist()
        return event.model_copy()

    def remove(self, event_id: str) -> bool:
        """Remove the event with event_id and persist.

        Returns False, leaving storage untouched, when no event matches.
        """
        remaining = [event for event in self._events if event.id != event_id]
        if len(remaining) == len(self._events):
            logger.debug(f"Remove ignored, no event {event_id}")
            return False
        self._events = remaining
        logger.info(f"Removed event {event_id}")
        self.persist()
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────

    def serialize(self) -> str:
        """Serialize the full collection as a JSON array."""
        return json.dumps([event.to_dict() for event in self._events], ensure_ascii=False)

    def persist(self) -> bool:
        """Write the full collection to storage.

        Returns:
            True on success, False if the storage rejected the write
        """
        try:
            self.storage.set_item(self.storage_key, self.serialize())
        except StorageError as e:
            logger.error(f"Failed to save events: {e}")
            self._notify(MSG_SAVE_FAILED)
            return False
        return True

    def hydrate(self) -> int:
        """Replace the in-memory collection with the stored one.

        Absent storage gives an empty store. Corrupt storage gives an empty
        store and a notification.

        Returns:
            Number of events loaded
        """
        self._events = []
        try:
            raw = self.storage.get_item(self.storage_key)
            if not raw:
                logger.debug(f"No stored events under '{self.storage_key}'")
                return 0
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError(f"expected a JSON array, got {type(records).__name__}")
            events = [Event.model_validate(record) for record in records]
            ids = [event.id for event in events]
            if len(set(ids)) != len(ids):
                duplicates = sorted({i for i in ids if ids.count(i) > 1})
                raise ValueError(f"duplicate event ids: {', '.join(duplicates)}")
        except (StorageError, ValueError, TypeError) as e:
            # pydantic.ValidationError and JSONDecodeError are ValueErrors
            logger.error(f"Failed to load events: {e}")
            self._notify(MSG_LOAD_FAILED)
            return 0

        self._events = events
        logger.info(f"Loaded {len(events)} event(s) from '{self.storage_key}'")
        return len(events)

    # ─────────────────────────────────────────────────────────────────────
    # Private helpers
    # ─────────────────────────────────────────────────────────────────────

    def _find(self, event_id: str) -> Event | None:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def _unique_id(self, candidate: str) -> str:
        taken = {event.id for event in self._events}
        while candidate in taken:
            candidate = str(int(candidate) + 1)
        return candidate

    def _notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier.show(message)
