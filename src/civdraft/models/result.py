"""
Submission results.

SubmissionResult is what the session layer hands back to the transport
for every candidate event: accepted with its log index, rejected with a
stable validation id, or unclassifiable.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from .validation_id import ValidationId


class SubmissionStatus(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    UNCLASSIFIABLE = "unclassifiable"  # neither a player nor an admin event


class SubmissionResult(BaseModel):
    """Outcome of submitting one candidate event."""
    status: SubmissionStatus
    validation_id: ValidationId | None = None  # Set only when REJECTED
    event_index: int | None = None  # Log position when ACCEPTED
    summary: str = ""
    countdown_until: datetime | None = None

    @property
    def accepted(self) -> bool:
        return self.status == SubmissionStatus.ACCEPTED
