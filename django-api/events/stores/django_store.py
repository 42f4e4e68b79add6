"""Django ORM implementation of the EventStore."""

from decimal import Decimal

from events import models
from events.domain import Event, EventId, Money
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def save(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot save an event without an id")
        models.Event.objects.update_or_create(
            event_id=event.id.value,
            defaults={
                "event_name": event.event_name,
                "tags": list(event.tags) if event.tags is not None else None,
                "ticket_price": (
                    format(event.ticket_price.amount, "f") if event.ticket_price is not None else None
                ),
                "event_date_time": event.event_date_time,
                "duration_minutes": event.duration_minutes,
            },
        )
        return event

    def find_by_id(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(event_id=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def find_all(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.all()]

    def exists_by_id(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(event_id=event_id.value).exists()

    def delete_by_id(self, event_id: EventId) -> None:
        models.Event.objects.filter(event_id=event_id.value).delete()


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.event_id),
        event_name=row.event_name,
        tags=tuple(row.tags) if row.tags is not None else None,
        ticket_price=Money(Decimal(row.ticket_price)) if row.ticket_price is not None else None,
        event_date_time=row.event_date_time,
        duration_minutes=row.duration_minutes,
    )
