"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Money


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    None means "not provided" for every optional field. duration_minutes
    counts as set only when it is greater than zero.
    """

    id: EventId | None = None
    event_name: str | None = None
    tags: tuple[str | None, ...] | None = None
    ticket_price: Money | None = None
    event_date_time: datetime | None = None
    duration_minutes: int = 0
