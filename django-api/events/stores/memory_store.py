"""In-process EventStore used by tests and local runs."""

from threading import Lock

from events.domain import Event, EventId
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed event store; iteration follows insertion order."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        self._lock = Lock()
        for event in events or []:
            self.save(event)

    def save(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot save an event without an id")
        with self._lock:
            self._events[event.id] = event
        return event

    def find_by_id(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def find_all(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def exists_by_id(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def delete_by_id(self, event_id: EventId) -> None:
        with self._lock:
            self._events.pop(event_id, None)
