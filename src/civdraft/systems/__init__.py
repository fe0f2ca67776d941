"""
Draft systems.

Validation decides legality, redaction decides visibility, and the
orchestrator sequences both against a single Draft.
"""

from .validation import Validation, ALL_VALIDATIONS, validate
from .redaction import hidden_placeholder_for, is_entitled, redact_event, redacted_events
from .orchestrator import DraftOrchestrator

__all__ = [
    "Validation",
    "ALL_VALIDATIONS",
    "validate",
    "hidden_placeholder_for",
    "is_entitled",
    "redact_event",
    "redacted_events",
    "DraftOrchestrator",
]
