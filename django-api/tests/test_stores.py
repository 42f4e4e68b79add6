"""Contract tests shared by every EventStore implementation.

Run with: pytest tests/test_stores.py -v
"""

from datetime import datetime
from decimal import Decimal

import pytest

from events.domain import Event, EventId, Money
from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore


@pytest.fixture(params=["memory", "django"])
def event_store(request) -> EventStore:
    if request.param == "django":
        request.getfixturevalue("db")
        return DjangoEventStore()
    return InMemoryEventStore()


def make_event(name: str = "Expo") -> Event:
    return Event(
        id=EventId.generate(),
        event_name=name,
        tags=("tech", " Expo"),
        ticket_price=Money(Decimal("12.50")),
        event_date_time=datetime(2024, 9, 1, 18, 30),
        duration_minutes=180,
    )


class TestEventStoreContract:
    """Both stores honour save/find/exists/delete."""

    def test_save_then_find_round_trips_fields(self, event_store: EventStore):
        event = make_event()
        event_store.save(event)
        assert event_store.find_by_id(event.id) == event

    @pytest.mark.parametrize("amount", ["10.005", "0.0001", "123456789012.5", "7"])
    def test_price_is_stored_without_rounding(self, event_store: EventStore, amount: str):
        """Stored prices keep every decimal digit."""
        event = event_store.save(Event(id=EventId.generate(), ticket_price=Money(Decimal(amount))))

        stored = event_store.find_by_id(event.id)

        assert stored.ticket_price.amount == Decimal(amount)
        assert event_store.find_all()[0].ticket_price == Money(Decimal(amount))

    def test_find_missing_returns_none(self, event_store: EventStore):
        assert event_store.find_by_id(EventId.generate()) is None

    def test_exists_by_id(self, event_store: EventStore):
        event = event_store.save(make_event())
        assert event_store.exists_by_id(event.id)
        assert not event_store.exists_by_id(EventId.generate())

    def test_save_replaces_existing_record(self, event_store: EventStore):
        event = event_store.save(make_event("Before"))
        event_store.save(Event(id=event.id, event_name="After"))

        stored = event_store.find_by_id(event.id)
        assert stored == Event(id=event.id, event_name="After")
        assert len(event_store.find_all()) == 1

    def test_find_all_keeps_insertion_order(self, event_store: EventStore):
        saved = [event_store.save(make_event(name)) for name in ["b", "c", "a"]]
        assert [e.id for e in event_store.find_all()] == [e.id for e in saved]

    def test_delete_by_id(self, event_store: EventStore):
        event = event_store.save(make_event())
        event_store.delete_by_id(event.id)
        assert event_store.find_by_id(event.id) is None

    def test_delete_missing_is_ignored(self, event_store: EventStore):
        event_store.delete_by_id(EventId.generate())
        assert event_store.find_all() == []

    def test_save_without_id_is_rejected(self, event_store: EventStore):
        with pytest.raises(ValueError):
            event_store.save(Event(event_name="anonymous"))


class TestInMemoryEventStore:
    """Tests specific to the in-memory store."""

    def test_seeded_events_are_stored(self):
        events = [make_event("one"), make_event("two")]
        store = InMemoryEventStore(events)
        assert store.find_all() == events
