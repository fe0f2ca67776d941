"""
Draft validation rules.

Pure function: validate(draft, event) -> ValidationId | None.
No state mutation, no side effects.

Each rule is a predicate over the draft's derived views and a candidate
event, bound to a stable ValidationId. ALL_VALIDATIONS fixes the order
they run in; the first failing rule is the one reported, so the order
is observable by clients and must not change.

Rule families:
- VLD_0xx: schedule (draft running, right player, right category)
- VLD_1xx: picks and bans shared by all action types
- VLD_2xx: bans
- VLD_3xx: snipes

Content rules (1xx-3xx) only look at player events and pass when the
draft has no next action; VLD_000 reports that case.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ..models.action import ActionType, action_type_of
from ..models.civilisation import Civilisation
from ..models.event import AdminEvent, PlayerEvent, UnclassifiableEventError
from ..models.player import Player
from ..models.validation_id import ValidationId

if TYPE_CHECKING:
    from ..state.draft import Draft

logger = logging.getLogger(__name__)

Predicate = Callable[["Draft", "PlayerEvent | AdminEvent"], bool]


@dataclass(frozen=True)
class Validation:
    """A rule bound to its identifier."""
    validation_id: ValidationId
    predicate: Predicate

    def apply(self, draft: "Draft", event: PlayerEvent | AdminEvent) -> ValidationId | None:
        """The rule's id if it is violated, otherwise None."""
        if not self.predicate(draft, event):
            return self.validation_id
        return None


def _content_event(
    draft: "Draft", event: PlayerEvent | AdminEvent, action_type: ActionType | None = None,
) -> PlayerEvent | None:
    """The event as a PlayerEvent if a content rule should inspect it."""
    if not draft.has_next_action() or not isinstance(event, PlayerEvent):
        return None
    if action_type is not None and event.action_type != action_type:
        return None
    return event


# ─── Schedule ────────────────────────────────────────────────────

def _draft_is_running(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    return draft.draft_can_be_started() and draft.has_next_action()


def _players_turn(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    expected = draft.get_expected_action()
    if expected is None:
        return True
    return expected.player == event.player


def _scheduled_category(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    expected = draft.get_expected_action()
    if expected is None or not isinstance(event, PlayerEvent):
        return True
    return event.action_type == action_type_of(expected.action)


# ─── Picks and bans ──────────────────────────────────────────────

def _not_globally_banned(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _content_event(draft, event)
    if player_event is None:
        return True
    return player_event.civilisation not in draft.get_global_bans()


def _not_banned_by_picker(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _content_event(draft, event, ActionType.PICK)
    if player_event is None:
        return True
    return player_event.civilisation not in draft.get_bans_for_player(player_event.player)


def _not_already_picked(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _content_event(draft, event, ActionType.PICK)
    if player_event is None:
        return True
    return player_event.civilisation not in draft.get_exclusive_picks(player_event.player)


def _not_globally_picked(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _content_event(draft, event, ActionType.PICK)
    if player_event is None:
        return True
    return player_event.civilisation not in draft.get_global_picks()


def _not_already_banned(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _content_event(draft, event, ActionType.BAN)
    if player_event is None:
        return True
    return player_event.civilisation not in draft.get_exclusive_bans_by_player(player_event.player)


# ─── Snipes ──────────────────────────────────────────────────────

def _snipe_event(draft: "Draft", event: PlayerEvent | AdminEvent) -> PlayerEvent | None:
    player_event = _content_event(draft, event, ActionType.SNIPE)
    if player_event is None or player_event.player == Player.NONE:
        return None
    return player_event


def _snipe_target_picked(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _snipe_event(draft, event)
    if player_event is None:
        return True
    opponent_picks = draft.get_picks(player_event.player.opponent())
    return player_event.civilisation in opponent_picks


def _snipe_target_available(draft: "Draft", event: PlayerEvent | AdminEvent) -> bool:
    player_event = _snipe_event(draft, event)
    if player_event is None:
        return True
    available: Counter[Civilisation] = Counter(draft.get_picks(player_event.player.opponent()))
    if available[player_event.civilisation] == 0:
        # Not an opponent pick at all; VLD_300 owns that case
        return True

    chain = draft.get_snipes(player_event.player) + [player_event.civilisation]
    for sniped in chain:
        if available[sniped] <= 0:
            return False
        available[sniped] -= 1
    return True


VLD_000 = Validation(ValidationId.VLD_000, _draft_is_running)
VLD_001 = Validation(ValidationId.VLD_001, _players_turn)
VLD_002 = Validation(ValidationId.VLD_002, _scheduled_category)
VLD_100 = Validation(ValidationId.VLD_100, _not_globally_banned)
VLD_101 = Validation(ValidationId.VLD_101, _not_banned_by_picker)
VLD_102 = Validation(ValidationId.VLD_102, _not_already_picked)
VLD_103 = Validation(ValidationId.VLD_103, _not_globally_picked)
VLD_200 = Validation(ValidationId.VLD_200, _not_already_banned)
VLD_300 = Validation(ValidationId.VLD_300, _snipe_target_picked)
VLD_301 = Validation(ValidationId.VLD_301, _snipe_target_available)

ALL_VALIDATIONS: tuple[Validation, ...] = (
    VLD_000,
    VLD_001,
    VLD_002,

    VLD_100,
    VLD_101,
    VLD_102,
    VLD_103,

    VLD_200,

    VLD_300,
    VLD_301,
)


def validate(draft: "Draft", event: PlayerEvent | AdminEvent) -> ValidationId | None:
    """
    Check a candidate event against the draft.

    Runs ALL_VALIDATIONS in order and stops at the first violation.
    Does not append the event.

    Returns:
        The violated rule's id, or None if the event may be appended

    Raises:
        UnclassifiableEventError: If ``event`` is neither a PlayerEvent nor an AdminEvent
    """
    if not isinstance(event, (PlayerEvent, AdminEvent)):
        raise UnclassifiableEventError(
            f"cannot validate {type(event).__name__}", event,
        )

    for validation in ALL_VALIDATIONS:
        violated = validation.apply(draft, event)
        if violated is not None:
            logger.debug(f"Event #{draft.next_action} failed {violated.value}")
            return violated
    return None
