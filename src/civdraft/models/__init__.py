"""
Data model for civilisation drafts.

    Preset (turns) + DraftEvent log → Draft (state) → ValidationId | None

All models are immutable Pydantic models so they can be compared
structurally and serialised to the wire as-is.
"""

from .player import Player
from .civilisation import (
    GameVersion,
    Civilisation,
    HIDDEN,
    HIDDEN_PICK,
    HIDDEN_BAN,
    HIDDEN_SNIPE,
    PLACEHOLDERS,
    ALL_CIVILISATIONS,
    civilisation_by_name,
    is_technical_civilisation,
)
from .action import (
    Action,
    ActionType,
    Exclusivity,
    action_type_of,
    exclusivity_of,
    is_hidden,
    is_pick,
    is_nonglobal_ban,
    is_snipe,
)
from .preset import Turn, Preset, SAMPLE, SIMPLE, get_preset, list_presets
from .event import (
    PlayerEvent,
    AdminEvent,
    DraftEvent,
    UnclassifiableEventError,
    is_player_event,
    is_admin_event,
    parse_draft_event,
    dump_draft_event,
)
from .validation_id import ValidationId, describe
from .result import SubmissionResult, SubmissionStatus

__all__ = [
    "Player",
    # Civilisations
    "GameVersion",
    "Civilisation",
    "HIDDEN",
    "HIDDEN_PICK",
    "HIDDEN_BAN",
    "HIDDEN_SNIPE",
    "PLACEHOLDERS",
    "ALL_CIVILISATIONS",
    "civilisation_by_name",
    "is_technical_civilisation",
    # Actions
    "Action",
    "ActionType",
    "Exclusivity",
    "action_type_of",
    "exclusivity_of",
    "is_hidden",
    "is_pick",
    "is_nonglobal_ban",
    "is_snipe",
    # Presets
    "Turn",
    "Preset",
    "SAMPLE",
    "SIMPLE",
    "get_preset",
    "list_presets",
    # Events
    "PlayerEvent",
    "AdminEvent",
    "DraftEvent",
    "UnclassifiableEventError",
    "is_player_event",
    "is_admin_event",
    "parse_draft_event",
    "dump_draft_event",
    # Results
    "ValidationId",
    "describe",
    "SubmissionResult",
    "SubmissionStatus",
]
