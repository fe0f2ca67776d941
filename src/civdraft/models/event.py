"""
Draft events.

Events are the entries of a draft's append-only log. Two shapes exist:

- PlayerEvent: a concrete move by a player against a civilisation
- AdminEvent: an administrative record that fills a slot without a civilisation

Both carry an explicit ``kind`` tag. Older clients send untagged payloads,
so parse_draft_event() also classifies by shape: a payload with a
civilisation is a player event, one with only an action is an admin event.
Anything else is rejected as unclassifiable rather than defaulted.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from .action import Action, ActionType
from .civilisation import Civilisation
from .player import Player


class UnclassifiableEventError(ValueError):
    """A candidate could not be classified as a player or admin event."""
    def __init__(self, reason: str, payload: Any = None):
        self.reason = reason
        self.payload = payload
        super().__init__(f"Unclassifiable draft event: {reason}")


_EVENT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


class PlayerEvent(BaseModel):
    """A move by a player against a civilisation."""
    model_config = _EVENT_CONFIG

    kind: Literal["player"] = "player"
    player: Player
    action_type: ActionType
    civilisation: Civilisation


class AdminEvent(BaseModel):
    """An administrative record; occupies a slot, names no civilisation."""
    model_config = _EVENT_CONFIG

    kind: Literal["admin"] = "admin"
    player: Player
    action: Action


DraftEvent = Annotated[Union[PlayerEvent, AdminEvent], Field(discriminator="kind")]

_draft_event_adapter: TypeAdapter = TypeAdapter(DraftEvent)


def is_player_event(event: Any) -> bool:
    return isinstance(event, PlayerEvent)


def is_admin_event(event: Any) -> bool:
    return isinstance(event, AdminEvent)


def parse_draft_event(payload: Any) -> PlayerEvent | AdminEvent:
    """
    Classify and build a draft event from a wire payload.

    Args:
        payload: An event instance, or a mapping in tagged or legacy form

    Returns:
        PlayerEvent or AdminEvent

    Raises:
        UnclassifiableEventError: If the payload fits neither shape
    """
    if isinstance(payload, (PlayerEvent, AdminEvent)):
        return payload
    if not isinstance(payload, Mapping):
        raise UnclassifiableEventError(
            f"expected a mapping, got {type(payload).__name__}", payload,
        )

    data = dict(payload)
    if "kind" not in data:
        # Legacy shape: discriminate on field presence
        if "civilisation" in data:
            data["kind"] = "player"
        elif "action" in data:
            data["kind"] = "admin"
        else:
            raise UnclassifiableEventError(
                "payload has neither a civilisation nor an action", payload,
            )

    try:
        return _draft_event_adapter.validate_python(data)
    except ValidationError as exc:
        raise UnclassifiableEventError(
            f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}",
            payload,
        ) from exc


def dump_draft_event(event: PlayerEvent | AdminEvent) -> dict:
    """Wire form of an event (camelCase keys, enum values)."""
    return event.model_dump(mode="json", by_alias=True)
