import pytest

from monthcal import create_app
from monthcal.controller import CalendarController
from monthcal.event_store import EventStore
from monthcal.navigation import MonthCursor
from monthcal.notification import Notifier
from monthcal.storage import MemoryStorage


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier(clock):
    """Notifier driven by the fake clock, without background timers."""
    return Notifier(delay=3.0, clock=clock, auto_dismiss=False)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, notifier):
    """Opened event store on in-memory storage."""
    with EventStore(storage, notifier=notifier) as store:
        yield store


@pytest.fixture
def sample_events(store):
    """A few events around February 2024."""
    return [
        store.add({"id": "1", "title": "Standup", "date": "2024-02-05", "time": "09:00"}),
        store.add({"id": "2", "title": "Gym", "date": "2024-02-05", "time": "08:00"}),
        store.add({"id": "3", "title": "Birthday", "date": "2024-02-05"}),
        store.add({"id": "4", "title": "Review", "date": "2024-02-06", "category": "work"}),
        store.add({"id": "5", "title": "New year", "date": "2024-01-29"}),
    ]


@pytest.fixture
def controller(store, notifier):
    return CalendarController(store, notifier=notifier, cursor=MonthCursor(2024, 2))


@pytest.fixture
def app(controller):
    """Create and configure a Flask app for testing."""
    app = create_app(controller)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
