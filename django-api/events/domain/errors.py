"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event not found with id: {event_id}",
        )
        self.event_id = event_id


class InvalidArgumentError(DomainError):
    """Raised for malformed inputs such as negative prices or inverted ranges."""

    def __init__(self, reason: str, code: ErrorCode = ErrorCode.INVALID_ARGUMENT) -> None:
        super().__init__(code=code, message=reason)
        self.reason = reason


class InvalidEventIdError(InvalidArgumentError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid event ID format", code=ErrorCode.INVALID_EVENT_ID)
