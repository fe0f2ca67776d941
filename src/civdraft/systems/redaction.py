"""
Hidden-civilisation redaction.

Turns played under a hidden Action variant must not leak the chosen
civilisation to anyone but the acting player until the draft is over.
Redaction is applied to what is broadcast, after an event has been
accepted; validation always reads the real log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.action import ActionType, is_hidden
from ..models.civilisation import (
    HIDDEN,
    HIDDEN_BAN,
    HIDDEN_PICK,
    HIDDEN_SNIPE,
    Civilisation,
)
from ..models.event import AdminEvent, PlayerEvent
from ..models.player import Player

if TYPE_CHECKING:
    from ..state.draft import Draft


_PLACEHOLDERS: dict[ActionType, Civilisation] = {
    ActionType.PICK: HIDDEN_PICK,
    ActionType.BAN: HIDDEN_BAN,
    ActionType.SNIPE: HIDDEN_SNIPE,
}


def hidden_placeholder_for(action_type: ActionType | None) -> Civilisation:
    """Placeholder shown instead of a hidden civilisation."""
    return _PLACEHOLDERS.get(action_type, HIDDEN)


def is_entitled(draft: "Draft", index: int, viewer: Player) -> bool:
    """Whether ``viewer`` may see the real civilisation of event ``index``."""
    event = draft.events[index]
    if not isinstance(event, PlayerEvent):
        return True
    if not is_hidden(draft.turn_for_event(index).action):
        return True
    if draft.is_done():
        return True
    return viewer != Player.NONE and viewer == event.player


def redact_event(draft: "Draft", index: int, viewer: Player) -> PlayerEvent | AdminEvent:
    """The event at ``index`` as ``viewer`` is allowed to see it."""
    event = draft.events[index]
    if is_entitled(draft, index, viewer):
        return event
    return event.model_copy(
        update={"civilisation": hidden_placeholder_for(event.action_type)},
    )


def redacted_events(draft: "Draft", viewer: Player) -> list[PlayerEvent | AdminEvent]:
    return [redact_event(draft, i, viewer) for i in range(len(draft.events))]
