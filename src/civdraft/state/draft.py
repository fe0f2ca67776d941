"""
Draft aggregate.

The event log is the only mutable state. Everything else (whose turn it
is, who banned or picked what) is a projection recomputed from the log
on every call, so the views can never drift from the events.

Event i in the log was played under preset.turns[i]; the exclusivity of
a pick or ban comes from that turn's Action variant, not from the event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, model_validator

from ..models.action import ActionType, Exclusivity, exclusivity_of
from ..models.civilisation import Civilisation
from ..models.event import AdminEvent, DraftEvent, PlayerEvent
from ..models.player import Player
from ..models.preset import Preset, Turn

logger = logging.getLogger(__name__)


class DraftError(Exception):
    """Error in draft bookkeeping (a programming fault, not a rule violation)."""
    pass


class DraftCompleteError(DraftError):
    """An event was appended after the last scheduled turn."""
    def __init__(self, preset_length: int):
        self.preset_length = preset_length
        super().__init__(
            f"Draft is complete: all {preset_length} turns have been played."
        )


class Draft(BaseModel):
    """
    A draft in progress.

    Names and readiness belong to the session layer; the preset is fixed
    at creation; events only ever grow through append_event().
    """
    name_host: str = "…"
    name_guest: str = "…"
    host_ready: bool = False
    guest_ready: bool = False
    preset: Preset
    events: tuple[DraftEvent, ...] = ()

    @model_validator(mode="after")
    def check_log_fits_preset(self) -> "Draft":
        if len(self.events) > len(self.preset.turns):
            raise ValueError(
                f"{len(self.events)} events do not fit preset "
                f"'{self.preset.name}' ({len(self.preset.turns)} turns)"
            )
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "events":
            raise AttributeError("events only grow through append_event()")
        if name == "preset":
            raise AttributeError("the preset is fixed at creation")
        super().__setattr__(name, value)

    # ─── Schedule ────────────────────────────────────────────────

    @property
    def next_action(self) -> int:
        """Index of the next slot to fill."""
        return len(self.events)

    def has_next_action(self) -> bool:
        return self.next_action < len(self.preset.turns)

    def is_done(self) -> bool:
        return not self.has_next_action()

    def get_expected_action(self) -> Turn | None:
        """The scheduled turn for the next event, or None once complete."""
        if not self.has_next_action():
            return None
        return self.preset.turns[self.next_action]

    def turn_for_event(self, index: int) -> Turn:
        """The turn the event at ``index`` fills."""
        return self.preset.turn_at(index)

    # ─── Session ─────────────────────────────────────────────────

    def draft_can_be_started(self) -> bool:
        """Both players have joined."""
        return self.host_ready and self.guest_ready

    def set_player_name(self, player: Player, name: str) -> None:
        """Record a joined player's name and mark them ready."""
        if player == Player.HOST:
            self.name_host = name
            self.host_ready = True
        elif player == Player.GUEST:
            self.name_guest = name
            self.guest_ready = True

    # ─── Log ─────────────────────────────────────────────────────

    def append_event(self, event: PlayerEvent | AdminEvent) -> int:
        """
        Append a validated event to the log.

        Returns:
            The index the event was stored at

        Raises:
            DraftCompleteError: If every scheduled turn is already filled
        """
        if not self.has_next_action():
            raise DraftCompleteError(len(self.preset.turns))
        super().__setattr__("events", self.events + (event,))
        logger.debug(f"Appended event #{len(self.events) - 1}: {event!r}")
        return len(self.events) - 1

    def _player_events(self) -> Iterator[tuple[Turn, PlayerEvent]]:
        """Player events paired with the turn they were played under."""
        for index, event in enumerate(self.events):
            if isinstance(event, PlayerEvent):
                yield self.turn_for_event(index), event

    def _collect(
        self,
        action_type: ActionType,
        player: Player | None = None,
        exclusivity: Callable[[Exclusivity], bool] | None = None,
    ) -> list[Civilisation]:
        civilisations: list[Civilisation] = []
        for turn, event in self._player_events():
            if event.action_type != action_type:
                continue
            if player is not None and event.player != player:
                continue
            if exclusivity is not None and not exclusivity(exclusivity_of(turn.action)):
                continue
            civilisations.append(event.civilisation)
        return civilisations

    # ─── Derived views ───────────────────────────────────────────

    def get_global_bans(self) -> list[Civilisation]:
        """Civilisations banned for everyone, whoever banned them."""
        return self._collect(ActionType.BAN, exclusivity=lambda e: e == Exclusivity.GLOBAL)

    def get_bans_for_player(self, player: Player) -> list[Civilisation]:
        """Civilisations banned by ``player`` under any ban variant."""
        return self._collect(ActionType.BAN, player)

    def get_exclusive_picks(self, player: Player) -> list[Civilisation]:
        return self._collect(
            ActionType.PICK, player, exclusivity=lambda e: e == Exclusivity.EXCLUSIVE,
        )

    def get_global_picks(self) -> list[Civilisation]:
        return self._collect(ActionType.PICK, exclusivity=lambda e: e == Exclusivity.GLOBAL)

    def get_exclusive_bans_by_player(self, player: Player) -> list[Civilisation]:
        return self._collect(
            ActionType.BAN, player, exclusivity=lambda e: e == Exclusivity.EXCLUSIVE,
        )

    def get_picks(self, player: Player) -> list[Civilisation]:
        """Everything ``player`` picked, any variant, in log order."""
        return self._collect(ActionType.PICK, player)

    def get_snipes(self, player: Player) -> list[Civilisation]:
        """Everything ``player`` sniped, in log order."""
        return self._collect(ActionType.SNIPE, player)
