from events.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidEventIdError,
)
from events.domain.models import Event
from events.domain.value_objects import EventId, Money

__all__ = [
    "Event",
    "EventId",
    "Money",
    "DomainError",
    "ErrorCode",
    "EventNotFoundError",
    "InvalidArgumentError",
    "InvalidEventIdError",
]
