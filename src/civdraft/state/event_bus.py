"""
Event bus for draft session changes.

Decouples the session orchestrator from whatever relays state to the
players (socket layer, CLI, tests). Listeners subscribe to an EventType
and are called synchronously on emit().

Usage:
    from .event_bus import get_event_bus, EventType

    bus = get_event_bus()
    bus.on(EventType.EVENT_ACCEPTED, relay_to_players)

    bus.emit(EventType.EVENT_ACCEPTED, draft_id="abc", index=3)

    def relay_to_players(event: SessionEvent):
        print(f"Event {event.data['index']} accepted")
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Session notifications that can be published."""

    # Lobby
    PLAYER_JOINED = "player.joined"
    DRAFT_STARTED = "draft.started"

    # Log
    EVENT_ACCEPTED = "event.accepted"
    EVENT_REJECTED = "event.rejected"
    EVENT_UNCLASSIFIABLE = "event.unclassifiable"
    DRAFT_COMPLETED = "draft.completed"


@dataclass
class SessionEvent:
    """
    Notification payload.

    Attributes:
        type: The event type (from EventType enum)
        data: Event-specific payload as dict
        draft_id: ID of the draft this notification belongs to
        timestamp: When the notification was emitted
    """

    type: EventType
    data: dict = field(default_factory=dict)
    draft_id: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.data}"


EventHandler = Callable[[SessionEvent], None]


class EventBus:
    """
    Synchronous event bus.

    Listeners run in the emitting thread, in subscription order.
    A listener that raises is logged and skipped.
    """

    def __init__(self, history_limit: int = 100):
        self._listeners: dict[EventType, list[EventHandler]] = {}
        self._history: list[SessionEvent] = []
        self._history_limit = history_limit

    def on(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to an event type."""
        handlers = self._listeners.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def off(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe from an event type."""
        if event_type in self._listeners and handler in self._listeners[event_type]:
            self._listeners[event_type].remove(handler)

    def emit(self, event_type: EventType, draft_id: str = "", **data) -> SessionEvent:
        """
        Emit a notification to all subscribers.

        Args:
            event_type: The type of event
            draft_id: Draft context (optional)
            **data: Event-specific data

        Returns:
            The emitted SessionEvent
        """
        event = SessionEvent(type=event_type, data=data, draft_id=draft_id)

        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]

        for handler in list(self._listeners.get(event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in handler for {event_type.value}: {e}")

        return event

    def clear(self) -> None:
        """Drop all listeners and history."""
        self._listeners.clear()
        self._history.clear()

    def get_history(self, event_type: EventType | None = None) -> list[SessionEvent]:
        """Recent notifications, optionally filtered by type."""
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.type == event_type]

    def listener_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))


_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Process-wide event bus (created on first use)."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def reset_event_bus() -> None:
    """Discard the process-wide bus. Used by tests."""
    global _event_bus
    _event_bus = None
