"""
Turn schedules.

A Preset is the script both players agree on before the draft starts.
Its length is the total number of actions in the draft; slot i says
who acts on the i-th event and under which Action variant.
"""

from pydantic import BaseModel, ConfigDict, Field

from .action import Action
from .player import Player


class Turn(BaseModel):
    """One scheduled slot."""
    model_config = ConfigDict(frozen=True)

    player: Player
    action: Action


class Preset(BaseModel):
    """Ordered, fixed-length sequence of turns."""
    model_config = ConfigDict(frozen=True)

    name: str
    turns: tuple[Turn, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.turns)

    def turn_at(self, index: int) -> Turn:
        """Slot at index. Raises IndexError outside the schedule."""
        if index < 0 or index >= len(self.turns):
            raise IndexError(
                f"Turn {index} is outside preset '{self.name}' ({len(self.turns)} turns)"
            )
        return self.turns[index]

    @classmethod
    def from_pairs(cls, name: str, pairs: list[tuple[Player, Action]]) -> "Preset":
        """Build a preset from (player, action) pairs."""
        return cls(name=name, turns=tuple(Turn(player=p, action=a) for p, a in pairs))


SAMPLE = Preset.from_pairs("sample", [
    (Player.HOST, Action.GLOBAL_PICK),
    (Player.HOST, Action.BAN),
    (Player.GUEST, Action.BAN),
    (Player.HOST, Action.HIDDEN_PICK),
    (Player.GUEST, Action.HIDDEN_PICK),
    (Player.HOST, Action.PICK),
    (Player.GUEST, Action.PICK),
    (Player.GUEST, Action.NONEXCLUSIVE_PICK),
    (Player.HOST, Action.NONEXCLUSIVE_PICK),
    (Player.HOST, Action.HIDDEN_GLOBAL_BAN),
    (Player.GUEST, Action.HIDDEN_GLOBAL_BAN),
    (Player.GUEST, Action.PICK),
    (Player.HOST, Action.PICK),
    (Player.HOST, Action.SNIPE),
    (Player.GUEST, Action.SNIPE),
])

SIMPLE = Preset.from_pairs("simple", [
    (Player.HOST, Action.BAN),
    (Player.GUEST, Action.BAN),
    (Player.HOST, Action.PICK),
    (Player.GUEST, Action.PICK),
])

_PRESETS: dict[str, Preset] = {preset.name: preset for preset in (SAMPLE, SIMPLE)}


def get_preset(name: str) -> Preset:
    """Built-in preset by name. Raises KeyError for unknown names."""
    try:
        return _PRESETS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown preset: {name}") from None


def list_presets() -> list[Preset]:
    return list(_PRESETS.values())
