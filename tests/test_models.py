"""Tests for the civilisation, action and preset models."""

import pytest

from civdraft.models import (
    ALL_CIVILISATIONS,
    HIDDEN,
    HIDDEN_BAN,
    HIDDEN_PICK,
    HIDDEN_SNIPE,
    Action,
    ActionType,
    Civilisation,
    Exclusivity,
    GameVersion,
    Player,
    Preset,
    SAMPLE,
    action_type_of,
    civilisation_by_name,
    exclusivity_of,
    get_preset,
    is_hidden,
    is_nonglobal_ban,
    is_pick,
    is_snipe,
    is_technical_civilisation,
    list_presets,
)
from civdraft.models.action import ACTION_TRAITS


class TestPlayer:
    """Test Player enum."""

    def test_opponents(self):
        """HOST and GUEST oppose each other."""
        assert Player.HOST.opponent() == Player.GUEST
        assert Player.GUEST.opponent() == Player.HOST

    def test_none_has_no_opponent(self):
        assert Player.NONE.opponent() == Player.NONE


class TestCivilisation:
    """Test Civilisation value semantics."""

    def test_structural_equality(self):
        """Two civilisations with the same name and version are equal."""
        a = Civilisation(name="Aztecs", game_version=GameVersion.AOC)
        b = Civilisation(name="Aztecs", game_version=GameVersion.AOC)
        assert a == b
        assert hash(a) == hash(b)

    def test_version_is_part_of_identity(self):
        a = Civilisation(name="Aztecs", game_version=GameVersion.AOC)
        b = Civilisation(name="Aztecs", game_version=GameVersion.AOR)
        assert a != b

    def test_immutable(self):
        civ = Civilisation(name="Aztecs", game_version=GameVersion.AOC)
        with pytest.raises(Exception):
            civ.name = "Britons"

    def test_accepts_camel_case(self):
        """Wire payloads use gameVersion."""
        civ = Civilisation.model_validate({"name": "Khmer", "gameVersion": "AOR"})
        assert civ == civilisation_by_name("khmer")

    def test_placeholders_never_equal_real_civilisations(self):
        for placeholder in (HIDDEN, HIDDEN_PICK, HIDDEN_BAN, HIDDEN_SNIPE):
            assert placeholder not in ALL_CIVILISATIONS

    def test_lookup_unknown_name(self):
        with pytest.raises(KeyError):
            civilisation_by_name("Romans")

    def test_technical_filter(self):
        """Placeholders are technical, playable civilisations are not."""
        assert is_technical_civilisation(HIDDEN_PICK)
        assert not any(is_technical_civilisation(c) for c in ALL_CIVILISATIONS)

    def test_catalogue_has_unique_names(self):
        names = [c.name for c in ALL_CIVILISATIONS]
        assert len(names) == len(set(names)) == 31


class TestActionTaxonomy:
    """Test total mappings over Action variants."""

    def test_every_variant_has_a_type(self):
        for action in Action:
            assert action_type_of(action) in ActionType

    def test_categories(self):
        assert action_type_of(Action.HIDDEN_EXCLUSIVE_PICK) == ActionType.PICK
        assert action_type_of(Action.HIDDEN_GLOBAL_BAN) == ActionType.BAN
        assert action_type_of(Action.HIDDEN_SNIPE) == ActionType.SNIPE

    def test_hidden_variants(self):
        hidden = {a for a in Action if is_hidden(a)}
        assert hidden == {
            Action.HIDDEN_PICK,
            Action.HIDDEN_EXCLUSIVE_PICK,
            Action.HIDDEN_BAN,
            Action.HIDDEN_EXCLUSIVE_BAN,
            Action.HIDDEN_GLOBAL_BAN,
            Action.HIDDEN_SNIPE,
        }

    def test_exclusivity(self):
        assert exclusivity_of(Action.PICK) == Exclusivity.EXCLUSIVE
        assert exclusivity_of(Action.HIDDEN_PICK) == Exclusivity.EXCLUSIVE
        assert exclusivity_of(Action.NONEXCLUSIVE_PICK) == Exclusivity.NONEXCLUSIVE
        assert exclusivity_of(Action.GLOBAL_PICK) == Exclusivity.GLOBAL
        assert exclusivity_of(Action.NONEXCLUSIVE_BAN) == Exclusivity.NONEXCLUSIVE
        assert exclusivity_of(Action.HIDDEN_GLOBAL_BAN) == Exclusivity.GLOBAL

    def test_hidden_exclusive_is_hidden_default(self):
        """HIDDEN_X and HIDDEN_EXCLUSIVE_X behave the same."""
        assert ACTION_TRAITS[Action.HIDDEN_PICK] == ACTION_TRAITS[Action.HIDDEN_EXCLUSIVE_PICK]
        assert ACTION_TRAITS[Action.HIDDEN_BAN] == ACTION_TRAITS[Action.HIDDEN_EXCLUSIVE_BAN]

    def test_helpers(self):
        assert is_pick(Action.GLOBAL_PICK)
        assert not is_pick(Action.BAN)
        assert is_nonglobal_ban(Action.HIDDEN_BAN)
        assert not is_nonglobal_ban(Action.HIDDEN_GLOBAL_BAN)
        assert is_snipe(Action.HIDDEN_SNIPE)


class TestPreset:
    """Test preset schedules."""

    def test_from_pairs(self):
        preset = Preset.from_pairs("x", [(Player.HOST, Action.PICK)])
        assert len(preset) == 1
        assert preset.turns[0].player == Player.HOST

    def test_turn_at_out_of_range(self):
        with pytest.raises(IndexError):
            SAMPLE.turn_at(len(SAMPLE.turns))

    def test_builtin_lookup(self):
        assert get_preset("SAMPLE") is SAMPLE
        assert {p.name for p in list_presets()} == {"sample", "simple"}

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("nope")
