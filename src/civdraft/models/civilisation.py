"""
Civilisation identity.

A civilisation is an immutable value compared on (name, game_version).
Placeholders (HIDDEN*) stand in for a real civilisation whose identity
must not be disclosed yet; they live in the TECHNICAL game version so
they can never collide with a playable entry.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GameVersion(str, Enum):
    """Expansion that introduced a civilisation."""
    AOC = "AOC"              # Age of Kings / The Conquerors
    AOF = "AOF"              # The Forgotten
    AOAK = "AOAK"            # The African Kingdoms
    AOR = "AOR"              # Rise of the Rajas
    TECHNICAL = "TECHNICAL"  # Placeholders, never draftable


class Civilisation(BaseModel):
    """A draftable entity or a hidden placeholder."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    game_version: GameVersion

    def __str__(self) -> str:
        return self.name


HIDDEN = Civilisation(name="HIDDEN", game_version=GameVersion.TECHNICAL)
HIDDEN_PICK = Civilisation(name="HIDDEN_PICK", game_version=GameVersion.TECHNICAL)
HIDDEN_BAN = Civilisation(name="HIDDEN_BAN", game_version=GameVersion.TECHNICAL)
HIDDEN_SNIPE = Civilisation(name="HIDDEN_SNIPE", game_version=GameVersion.TECHNICAL)

PLACEHOLDERS: tuple[Civilisation, ...] = (HIDDEN, HIDDEN_PICK, HIDDEN_BAN, HIDDEN_SNIPE)


def _civs(game_version: GameVersion, *names: str) -> list[Civilisation]:
    return [Civilisation(name=name, game_version=game_version) for name in names]


ALL_CIVILISATIONS: tuple[Civilisation, ...] = tuple(
    _civs(
        GameVersion.AOC,
        "Britons", "Byzantines", "Celts", "Chinese", "Franks", "Goths",
        "Japanese", "Mongols", "Persians", "Saracens", "Teutons", "Turks",
        "Vikings", "Aztecs", "Huns", "Koreans", "Mayans", "Spanish",
    )
    + _civs(GameVersion.AOF, "Incas", "Indians", "Italians", "Magyars", "Slavs")
    + _civs(GameVersion.AOAK, "Berbers", "Ethiopians", "Malians", "Portuguese")
    + _civs(GameVersion.AOR, "Burmese", "Khmer", "Malay", "Vietnamese")
)


def civilisation_by_name(name: str) -> Civilisation:
    """
    Look up a playable civilisation or placeholder by name.

    Matching is case-insensitive. Raises KeyError for unknown names.
    """
    wanted = name.strip().lower()
    for civ in ALL_CIVILISATIONS + PLACEHOLDERS:
        if civ.name.lower() == wanted:
            return civ
    raise KeyError(f"Unknown civilisation: {name}")


def is_technical_civilisation(civilisation: Civilisation) -> bool:
    """Whether a civilisation is a non-playable technical entry."""
    return civilisation.game_version == GameVersion.TECHNICAL
