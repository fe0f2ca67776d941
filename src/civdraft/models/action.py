"""
Action taxonomy.

An Action is a scheduled variant: a coarse ActionType (pick/ban/snipe)
plus two orthogonal modifiers, exclusivity and visibility. Every variant
has an entry in ACTION_TRAITS, so the lookups below are total.
"""

from dataclasses import dataclass
from enum import Enum


class ActionType(str, Enum):
    """Coarse category of an action, independent of modifiers."""
    PICK = "PICK"
    BAN = "BAN"
    SNIPE = "SNIPE"


class Exclusivity(str, Enum):
    """Who an action applies to."""
    EXCLUSIVE = "EXCLUSIVE"        # the acting player only, no duplicates
    NONEXCLUSIVE = "NONEXCLUSIVE"  # shared, no duplicate guard
    GLOBAL = "GLOBAL"              # every player at once


class Action(str, Enum):
    """Variant a preset slot is played under."""
    PICK = "PICK"
    NONEXCLUSIVE_PICK = "NONEXCLUSIVE_PICK"
    GLOBAL_PICK = "GLOBAL_PICK"
    HIDDEN_PICK = "HIDDEN_PICK"
    HIDDEN_EXCLUSIVE_PICK = "HIDDEN_EXCLUSIVE_PICK"
    BAN = "BAN"
    NONEXCLUSIVE_BAN = "NONEXCLUSIVE_BAN"
    HIDDEN_BAN = "HIDDEN_BAN"
    HIDDEN_EXCLUSIVE_BAN = "HIDDEN_EXCLUSIVE_BAN"
    HIDDEN_GLOBAL_BAN = "HIDDEN_GLOBAL_BAN"
    SNIPE = "SNIPE"
    HIDDEN_SNIPE = "HIDDEN_SNIPE"


@dataclass(frozen=True)
class ActionTraits:
    """Decomposition of an Action into category and modifiers."""
    action_type: ActionType
    exclusivity: Exclusivity
    hidden: bool


# Exclusive is the default, so HIDDEN_X and HIDDEN_EXCLUSIVE_X share traits.
ACTION_TRAITS: dict[Action, ActionTraits] = {
    Action.PICK: ActionTraits(ActionType.PICK, Exclusivity.EXCLUSIVE, False),
    Action.NONEXCLUSIVE_PICK: ActionTraits(ActionType.PICK, Exclusivity.NONEXCLUSIVE, False),
    Action.GLOBAL_PICK: ActionTraits(ActionType.PICK, Exclusivity.GLOBAL, False),
    Action.HIDDEN_PICK: ActionTraits(ActionType.PICK, Exclusivity.EXCLUSIVE, True),
    Action.HIDDEN_EXCLUSIVE_PICK: ActionTraits(ActionType.PICK, Exclusivity.EXCLUSIVE, True),
    Action.BAN: ActionTraits(ActionType.BAN, Exclusivity.EXCLUSIVE, False),
    Action.NONEXCLUSIVE_BAN: ActionTraits(ActionType.BAN, Exclusivity.NONEXCLUSIVE, False),
    Action.HIDDEN_BAN: ActionTraits(ActionType.BAN, Exclusivity.EXCLUSIVE, True),
    Action.HIDDEN_EXCLUSIVE_BAN: ActionTraits(ActionType.BAN, Exclusivity.EXCLUSIVE, True),
    Action.HIDDEN_GLOBAL_BAN: ActionTraits(ActionType.BAN, Exclusivity.GLOBAL, True),
    Action.SNIPE: ActionTraits(ActionType.SNIPE, Exclusivity.EXCLUSIVE, False),
    Action.HIDDEN_SNIPE: ActionTraits(ActionType.SNIPE, Exclusivity.EXCLUSIVE, True),
}


def action_type_of(action: Action) -> ActionType:
    """Coarse category of a variant."""
    return ACTION_TRAITS[action].action_type


def exclusivity_of(action: Action) -> Exclusivity:
    return ACTION_TRAITS[action].exclusivity


def is_hidden(action: Action) -> bool:
    """Whether the chosen civilisation is redacted until reveal."""
    return ACTION_TRAITS[action].hidden


def is_pick(action: Action) -> bool:
    return action_type_of(action) == ActionType.PICK


def is_nonglobal_ban(action: Action) -> bool:
    return action_type_of(action) == ActionType.BAN and exclusivity_of(action) != Exclusivity.GLOBAL


def is_snipe(action: Action) -> bool:
    return action_type_of(action) == ActionType.SNIPE
