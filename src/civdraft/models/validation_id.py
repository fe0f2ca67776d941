"""
Validation identifiers.

These strings are part of the wire contract with clients: they are sent
verbatim as rejection reasons and must never be renumbered.
"""

from enum import Enum


class ValidationId(str, Enum):
    VLD_000 = "VLD_000"  # Draft not started or already complete
    VLD_001 = "VLD_001"  # Not this player's turn
    VLD_002 = "VLD_002"  # Wrong action category for this turn
    VLD_100 = "VLD_100"  # Globally banned
    VLD_101 = "VLD_101"  # Banned by the picking player
    VLD_102 = "VLD_102"  # Already picked by this player
    VLD_103 = "VLD_103"  # Globally picked
    VLD_200 = "VLD_200"  # Already banned by this player
    VLD_300 = "VLD_300"  # Snipe target not picked by opponent
    VLD_301 = "VLD_301"  # Snipe target already consumed


VALIDATION_DESCRIPTIONS: dict[ValidationId, str] = {
    ValidationId.VLD_000: "The draft has not started yet or is already over.",
    ValidationId.VLD_001: "It is not this player's turn.",
    ValidationId.VLD_002: "The action does not match the scheduled turn.",
    ValidationId.VLD_100: "This civilisation has been banned for everyone.",
    ValidationId.VLD_101: "A player cannot pick a civilisation they banned.",
    ValidationId.VLD_102: "This civilisation has already been picked by this player.",
    ValidationId.VLD_103: "This civilisation has been picked globally.",
    ValidationId.VLD_200: "This civilisation has already been banned by this player.",
    ValidationId.VLD_300: "Only civilisations picked by the opponent can be sniped.",
    ValidationId.VLD_301: "Every pick of this civilisation by the opponent has already been sniped.",
}


def describe(validation_id: ValidationId) -> str:
    """Human-readable explanation of a validation id."""
    return VALIDATION_DESCRIPTIONS[validation_id]
