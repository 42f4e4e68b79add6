"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from events.domain import (
    Event,
    EventId,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidEventIdError,
    Money,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

PRICE_CEILING = Decimal("999999999")


class EventService:
    """Service for event record operations."""

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, event: Event) -> Event:
        """Store a new event, assigning an ID if it has none."""
        if event.id is None:
            event = replace(event, id=EventId.generate())
        saved = self._store.save(event)
        logger.info("Created event %s", saved.id)
        return saved

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return self._require_event(self._parse_id(event_id))

    def list_events(self) -> list[Event]:
        """Return all events in store order."""
        return self._store.find_all()

    def update_event(self, event_id: str, event: Event) -> Event:
        """Replace every field of an existing event.

        Fields missing from ``event`` are cleared. Any ID on the payload is
        ignored in favour of ``event_id``.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._parse_id(event_id)
        self._require_exists(parsed)
        saved = self._store.save(replace(event, id=parsed))
        logger.info("Replaced event %s", parsed)
        return saved

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._parse_id(event_id)
        self._require_exists(parsed)
        self._store.delete_by_id(parsed)
        logger.info("Deleted event %s", parsed)

    def partial_update_event(self, event_id: str, partial: Event) -> Event:
        """Merge the provided fields of ``partial`` into an existing event.

        An empty tags tuple and a non-positive duration count as absent.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        existing = self._require_event(self._parse_id(event_id))
        changes: dict[str, object] = {}

        if partial.event_name is not None:
            changes["event_name"] = partial.event_name
        if partial.tags:
            changes["tags"] = partial.tags
        if partial.ticket_price is not None:
            changes["ticket_price"] = partial.ticket_price
        if partial.event_date_time is not None:
            changes["event_date_time"] = partial.event_date_time
        if partial.duration_minutes > 0:
            changes["duration_minutes"] = partial.duration_minutes

        saved = self._store.save(replace(existing, **changes))
        logger.info("Patched event %s fields=%s", existing.id, sorted(changes))
        return saved

    def get_events_by_tag(self, tag: str | None) -> list[Event]:
        """Return events carrying ``tag``, compared trimmed and case-insensitively."""
        if tag is None or not tag.strip():
            return []
        wanted = tag.strip().lower()

        matches = [
            event
            for event in self._store.find_all()
            if event.tags is not None
            and any(t is not None and t.strip() and t.strip().lower() == wanted for t in event.tags)
        ]
        logger.debug("Tag %r matched %d events", wanted, len(matches))
        return matches

    def get_upcoming_events(self) -> list[Event]:
        """Return events at or after the current time, soonest first."""
        now = self._clock()
        upcoming = [
            event
            for event in self._store.find_all()
            if event.event_date_time is not None and event.event_date_time >= now
        ]
        return sorted(upcoming, key=lambda event: event.event_date_time)

    def get_events_by_price_range(
        self, min_price: Decimal | None, max_price: Decimal | None
    ) -> list[Event]:
        """Return events priced within [min_price, max_price], cheapest first.

        With both bounds missing every event is returned in store order.

        Raises:
            InvalidArgumentError: If a bound is negative or min exceeds max.
        """
        if min_price is None and max_price is None:
            return self._store.find_all()

        low = Decimal(0) if min_price is None else min_price
        high = PRICE_CEILING if max_price is None else max_price

        if low < 0 or high < 0:
            raise self._invalid("Price range cannot be negative.")
        if low > high:
            raise self._invalid("min_price cannot be greater than max_price.")

        in_range = [
            event
            for event in self._store.find_all()
            if event.ticket_price is not None and low <= event.ticket_price.amount <= high
        ]
        logger.debug("Price range [%s, %s] matched %d events", low, high, len(in_range))
        return sorted(in_range, key=lambda event: event.ticket_price.amount)

    def get_events_by_date_range(
        self, start: datetime | None, end: datetime | None
    ) -> list[Event]:
        """Return events dated within [start, end], earliest first.

        With both bounds missing every event is returned in store order.

        Raises:
            InvalidArgumentError: If start is after end.
        """
        if start is None and end is None:
            return self._store.find_all()

        start = datetime.min if start is None else start
        end = datetime.max if end is None else end

        if start > end:
            raise self._invalid("start cannot be after end.")

        in_range = [
            event
            for event in self._store.find_all()
            if event.event_date_time is not None and start <= event.event_date_time <= end
        ]
        logger.debug("Date range [%s, %s] matched %d events", start, end, len(in_range))
        return sorted(in_range, key=lambda event: event.event_date_time)

    def update_event_price(self, event_id: str | None, new_price: Decimal | None) -> Event:
        """Replace only the ticket price of an existing event.

        Raises:
            InvalidArgumentError: If either argument is missing or the price is negative.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if event_id is None:
            raise self._invalid("event_id cannot be null.")
        if new_price is None:
            raise self._invalid("new_price cannot be null.")
        if new_price < 0:
            raise self._invalid("new_price cannot be negative.")

        existing = self._require_event(self._parse_id(event_id))
        saved = self._store.save(replace(existing, ticket_price=Money(new_price)))
        logger.info("Repriced event %s to %s", existing.id, saved.ticket_price)
        return saved

    def _parse_id(self, event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Rejected malformed event id %r", event_id)
            raise InvalidEventIdError() from exc

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.find_by_id(event_id)
        if event is None:
            logger.warning("Event %s not found", event_id)
            raise EventNotFoundError(str(event_id))
        return event

    def _require_exists(self, event_id: EventId) -> None:
        if not self._store.exists_by_id(event_id):
            logger.warning("Event %s not found", event_id)
            raise EventNotFoundError(str(event_id))

    @staticmethod
    def _invalid(reason: str) -> InvalidArgumentError:
        logger.warning("Invalid argument: %s", reason)
        return InvalidArgumentError(reason)
