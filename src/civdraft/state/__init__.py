"""Draft state: the event log aggregate and session notifications."""

from .draft import Draft, DraftError, DraftCompleteError
from .event_bus import (
    EventBus,
    EventType,
    SessionEvent,
    get_event_bus,
    reset_event_bus,
)

__all__ = [
    # Draft
    "Draft",
    "DraftError",
    "DraftCompleteError",
    # Event Bus
    "EventBus",
    "EventType",
    "SessionEvent",
    "get_event_bus",
    "reset_event_bus",
]
