"""
Draft session orchestrator.

Owns one Draft and serializes every change to it:
    join → (both ready) → submit … submit → complete

Design principles:
- Orchestrator sequences and delegates; the rules live in validation.py.
- validate + append run under a single lock, so two players submitting
  at once are checked against a consistent log, one after the other.
  Notifications and broadcasts for an accepted event are sent under the
  same lock, so viewers see snapshots in log order.
- Every outcome is a value (SubmissionResult), never an exception.
- Each state change emits a notification via the EventBus.

Usage:
    orchestrator = DraftOrchestrator(Draft(preset=SAMPLE))
    orchestrator.join(Player.HOST, "Alice")
    orchestrator.join(Player.GUEST, "Bob")

    result = orchestrator.submit({
        "player": "HOST",
        "actionType": "PICK",
        "civilisation": {"name": "Aztecs", "gameVersion": "AOC"},
    })
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Any, Callable

from ..config import Config, normalize_config
from ..models.event import (
    AdminEvent,
    PlayerEvent,
    UnclassifiableEventError,
    dump_draft_event,
    parse_draft_event,
)
from ..models.player import Player
from ..models.result import SubmissionResult, SubmissionStatus
from ..models.validation_id import describe
from ..state.draft import Draft
from ..state.event_bus import EventBus, EventType, get_event_bus
from .redaction import redacted_events
from .validation import validate

logger = logging.getLogger(__name__)

# Viewers that receive a broadcast after each accepted event
VIEWERS: tuple[Player, ...] = (Player.HOST, Player.GUEST, Player.NONE)

BroadcastFn = Callable[[Player, dict], None]


class DraftOrchestrator:
    """
    Serializes joins and submissions against one Draft.

    Responsibilities:
    - Readiness bookkeeping (join)
    - Classification of raw candidates
    - Validate + append under one lock
    - Countdown bookkeeping and notifications

    NOT responsible for:
    - Deciding legality (validation.validate)
    - Transport to the players (broadcast callback)
    """

    def __init__(
        self,
        draft: Draft,
        draft_id: str = "",
        config: Config | None = None,
        clock: Callable[[], datetime] | None = None,
        bus: EventBus | None = None,
    ):
        self._draft = draft
        self._draft_id = draft_id
        self._config: Config = normalize_config(config or {})
        self._clock = clock or datetime.now
        self._bus = bus or get_event_bus()
        self._lock = threading.RLock()
        self._countdown_until: datetime | None = None
        self._broadcast_fn: BroadcastFn | None = None
        # Highest nextAction sent to each viewer
        self._delivered: dict[Player, int] = {}
        # A restored draft with both players ready is already under way
        self._started = draft.draft_can_be_started()
        if self._started:
            self._restart_countdown()

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def countdown_until(self) -> datetime | None:
        """When the current turn's timer runs out (informational)."""
        return self._countdown_until

    def set_broadcast_fn(self, fn: BroadcastFn) -> None:
        """Register the callback that relays snapshots to each viewer."""
        self._broadcast_fn = fn

    def _restart_countdown(self) -> None:
        seconds = self._config["turn_timer_seconds"]
        self._countdown_until = self._clock() + timedelta(seconds=seconds)

    # ─── Lobby ───────────────────────────────────────────────────

    def join(self, player: Player, name: str) -> bool:
        """
        Record a player joining the draft.

        Returns:
            True if this join made the draft startable
        """
        with self._lock:
            self._draft.set_player_name(player, name)
            just_started = not self._started and self._draft.draft_can_be_started()
            if just_started:
                self._started = True
                self._restart_countdown()

        logger.info(f"{player.value} joined draft {self._draft_id or '<unnamed>'} as {name!r}")
        self._bus.emit(
            EventType.PLAYER_JOINED,
            draft_id=self._draft_id,
            player=player.value,
            name=name,
        )
        if just_started:
            logger.info(f"Draft {self._draft_id or '<unnamed>'} started")
            self._bus.emit(
                EventType.DRAFT_STARTED,
                draft_id=self._draft_id,
                turns=len(self._draft.preset.turns),
            )
        return just_started

    # ─── Submission ──────────────────────────────────────────────

    def submit(self, candidate: Any) -> SubmissionResult:
        """
        Classify, validate and (if legal) append a candidate event.

        Args:
            candidate: A PlayerEvent/AdminEvent or its wire mapping

        Returns:
            SubmissionResult with ACCEPTED, REJECTED or UNCLASSIFIABLE status
        """
        try:
            event = parse_draft_event(candidate)
        except UnclassifiableEventError as exc:
            logger.warning(f"Unclassifiable submission: {exc.reason}")
            self._bus.emit(
                EventType.EVENT_UNCLASSIFIABLE,
                draft_id=self._draft_id,
                reason=exc.reason,
            )
            return SubmissionResult(
                status=SubmissionStatus.UNCLASSIFIABLE,
                summary=str(exc),
            )

        with self._lock:
            violated = validate(self._draft, event)
            if violated is None:
                return self._accept(event)

        logger.warning(
            f"Rejected {event.player.value} event at turn {self._draft.next_action}: "
            f"{violated.value}"
        )
        self._bus.emit(
            EventType.EVENT_REJECTED,
            draft_id=self._draft_id,
            player=event.player.value,
            validation_id=violated.value,
        )
        return SubmissionResult(
            status=SubmissionStatus.REJECTED,
            validation_id=violated,
            summary=describe(violated),
            countdown_until=self._countdown_until,
        )

    def _accept(self, event: PlayerEvent | AdminEvent) -> SubmissionResult:
        # Called with self._lock held; notifications and broadcast stay in log order.
        index = self._draft.append_event(event)
        self._restart_countdown()
        countdown_until = self._countdown_until
        completed = self._draft.is_done()

        logger.info(f"Accepted {event.player.value} event #{index}")
        self._bus.emit(
            EventType.EVENT_ACCEPTED,
            draft_id=self._draft_id,
            player=event.player.value,
            index=index,
        )
        self._broadcast(self._build_payloads())
        if completed:
            logger.info(f"Draft {self._draft_id or '<unnamed>'} completed")
            self._bus.emit(
                EventType.DRAFT_COMPLETED,
                draft_id=self._draft_id,
                events=len(self._draft.events),
            )

        return SubmissionResult(
            status=SubmissionStatus.ACCEPTED,
            event_index=index,
            summary=_summarize(event),
            countdown_until=countdown_until,
        )

    # ─── Snapshots ───────────────────────────────────────────────

    def snapshot(self, viewer: Player) -> dict:
        """Wire snapshot of the draft as ``viewer`` may see it."""
        with self._lock:
            return self._snapshot(viewer)

    def _snapshot(self, viewer: Player) -> dict:
        draft = self._draft
        return {
            "nameHost": draft.name_host,
            "nameGuest": draft.name_guest,
            "hostReady": draft.host_ready,
            "guestReady": draft.guest_ready,
            "preset": draft.preset.name,
            "nextAction": draft.next_action,
            "events": [dump_draft_event(e) for e in redacted_events(draft, viewer)],
            "countdownUntil": (
                self._countdown_until.isoformat() if self._countdown_until else None
            ),
        }

    def _build_payloads(self) -> dict[Player, dict]:
        if self._broadcast_fn is None:
            return {}
        return {viewer: self._snapshot(viewer) for viewer in VIEWERS}

    def _broadcast(self, payloads: dict[Player, dict]) -> None:
        if self._broadcast_fn is None:
            return
        for viewer, payload in payloads.items():
            # A submit made from inside the callback may already have sent a newer snapshot
            if payload["nextAction"] < self._delivered.get(viewer, -1):
                logger.debug(f"Dropping stale snapshot #{payload['nextAction']} for {viewer.value}")
                continue
            self._delivered[viewer] = payload["nextAction"]
            self._broadcast_fn(viewer, payload)


def _summarize(event: PlayerEvent | AdminEvent) -> str:
    if isinstance(event, PlayerEvent):
        return f"{event.player.value} {event.action_type.value} {event.civilisation}"
    return f"{event.player.value} {event.action.value} (admin)"
