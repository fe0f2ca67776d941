"""Validation engine for scripted civilisation pick/ban/snipe drafts."""

from .models import (
    Action,
    ActionType,
    AdminEvent,
    Civilisation,
    GameVersion,
    Player,
    PlayerEvent,
    Preset,
    SubmissionResult,
    SubmissionStatus,
    Turn,
    ValidationId,
    parse_draft_event,
)
from .state import Draft
from .systems import DraftOrchestrator, validate

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionType",
    "AdminEvent",
    "Civilisation",
    "GameVersion",
    "Player",
    "PlayerEvent",
    "Preset",
    "SubmissionResult",
    "SubmissionStatus",
    "Turn",
    "ValidationId",
    "parse_draft_event",
    "Draft",
    "DraftOrchestrator",
    "validate",
]
