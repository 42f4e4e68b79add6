"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from events.domain import Event, EventId, EventNotFoundError, InvalidArgumentError, Money
from events.domain.errors import ErrorCode, InvalidEventIdError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("5"))) == "5.00"


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        assert EventId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")

    def test_generate_returns_distinct_ids(self):
        """EventId.generate never repeats."""
        assert EventId.generate() != EventId.generate()

    def test_str_is_canonical_uuid(self):
        """str(EventId) is the hyphenated UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        assert str(EventId.from_string(raw)) == raw


class TestEvent:
    """Tests for the Event domain model."""

    def test_defaults_mean_not_provided(self):
        """A bare Event has no id and no optional fields."""
        event = Event()
        assert event.id is None
        assert event.tags is None
        assert event.ticket_price is None
        assert event.duration_minutes == 0


class TestErrors:
    """Tests for domain errors."""

    def test_not_found_carries_event_id(self):
        """EventNotFoundError keeps the offending id."""
        error = EventNotFoundError("abc")
        assert error.event_id == "abc"
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert str(error).startswith("EVENT_NOT_FOUND: ")

    def test_invalid_argument_carries_reason(self):
        """InvalidArgumentError keeps the reason as its message."""
        error = InvalidArgumentError("start cannot be after end.")
        assert error.reason == "start cannot be after end."
        assert error.message == "start cannot be after end."

    def test_invalid_event_id_is_invalid_argument(self):
        """InvalidEventIdError is a kind of InvalidArgumentError."""
        error = InvalidEventIdError()
        assert isinstance(error, InvalidArgumentError)
        assert error.code is ErrorCode.INVALID_EVENT_ID
