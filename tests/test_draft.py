"""Tests for the Draft aggregate and its derived views."""

import pytest
from pydantic import ValidationError

from civdraft.models import Action, Player, civilisation_by_name
from civdraft.state import Draft, DraftCompleteError
from civdraft.models import SIMPLE, Preset


class TestSchedule:
    """Test next-action bookkeeping."""

    def test_new_draft(self):
        draft = Draft(preset=SIMPLE)
        assert draft.next_action == 0
        assert draft.has_next_action()
        assert draft.get_expected_action() == SIMPLE.turns[0]
        assert not draft.draft_can_be_started()

    def test_next_action_follows_log(self, make_draft, simple_pairs, ban, aztecs):
        draft = make_draft(simple_pairs, [ban(Player.HOST, aztecs)])
        assert draft.next_action == 1
        assert draft.get_expected_action().player == Player.GUEST

    def test_complete_draft(self, make_draft, admin):
        draft = make_draft([(Player.HOST, Action.PICK)], [admin(Player.NONE, Action.PICK)])
        assert draft.is_done()
        assert draft.get_expected_action() is None

    def test_append_past_end_raises(self, make_draft, admin):
        """Appending beyond the preset is a programming fault."""
        draft = make_draft([(Player.HOST, Action.PICK)], [admin(Player.NONE, Action.PICK)])
        with pytest.raises(DraftCompleteError):
            draft.append_event(admin(Player.NONE, Action.PICK))
        assert len(draft.events) == 1


class TestReadiness:
    """Test join bookkeeping."""

    def test_both_players_needed(self):
        draft = Draft(preset=SIMPLE)
        draft.set_player_name(Player.HOST, "Alice")
        assert draft.name_host == "Alice"
        assert not draft.draft_can_be_started()
        draft.set_player_name(Player.GUEST, "Bob")
        assert draft.draft_can_be_started()

    def test_none_is_ignored(self):
        draft = Draft(preset=SIMPLE)
        draft.set_player_name(Player.NONE, "Spectator")
        assert not draft.host_ready and not draft.guest_ready


class TestDerivedViews:
    """Test projections over the event log."""

    @pytest.fixture
    def mixed_draft(self, make_draft, pick, ban, snipe, admin):
        civ = civilisation_by_name
        pairs = [
            (Player.HOST, Action.GLOBAL_PICK),
            (Player.HOST, Action.BAN),
            (Player.GUEST, Action.NONEXCLUSIVE_BAN),
            (Player.GUEST, Action.HIDDEN_GLOBAL_BAN),
            (Player.HOST, Action.PICK),
            (Player.GUEST, Action.NONEXCLUSIVE_PICK),
            (Player.GUEST, Action.HIDDEN_PICK),
            (Player.HOST, Action.PICK),
            (Player.HOST, Action.SNIPE),
            (Player.HOST, Action.HIDDEN_SNIPE),
        ]
        events = [
            pick(Player.HOST, civ("Franks")),
            ban(Player.HOST, civ("Goths")),
            ban(Player.GUEST, civ("Huns")),
            ban(Player.GUEST, civ("Mayans")),
            pick(Player.HOST, civ("Britons")),
            pick(Player.GUEST, civ("Celts")),
            pick(Player.GUEST, civ("Chinese")),
            admin(Player.NONE, Action.PICK),
            snipe(Player.HOST, civ("Chinese")),
            snipe(Player.HOST, civ("Celts")),
        ]
        return make_draft(pairs, events)

    def test_global_bans(self, mixed_draft):
        assert mixed_draft.get_global_bans() == [civilisation_by_name("Mayans")]

    def test_bans_for_player_any_variant(self, mixed_draft):
        assert mixed_draft.get_bans_for_player(Player.GUEST) == [
            civilisation_by_name("Huns"),
            civilisation_by_name("Mayans"),
        ]

    def test_exclusive_bans(self, mixed_draft):
        assert mixed_draft.get_exclusive_bans_by_player(Player.HOST) == [civilisation_by_name("Goths")]
        assert mixed_draft.get_exclusive_bans_by_player(Player.GUEST) == []

    def test_exclusive_picks(self, mixed_draft):
        """Global and nonexclusive picks are not exclusive picks."""
        assert mixed_draft.get_exclusive_picks(Player.HOST) == [civilisation_by_name("Britons")]
        assert mixed_draft.get_exclusive_picks(Player.GUEST) == [civilisation_by_name("Chinese")]

    def test_global_picks(self, mixed_draft):
        assert mixed_draft.get_global_picks() == [civilisation_by_name("Franks")]

    def test_all_picks(self, mixed_draft):
        assert mixed_draft.get_picks(Player.HOST) == [
            civilisation_by_name("Franks"),
            civilisation_by_name("Britons"),
        ]

    def test_snipes_keep_order(self, mixed_draft):
        assert mixed_draft.get_snipes(Player.HOST) == [
            civilisation_by_name("Chinese"),
            civilisation_by_name("Celts"),
        ]
        assert mixed_draft.get_snipes(Player.GUEST) == []

    def test_views_return_copies(self, mixed_draft):
        """Mutating a view does not touch the draft."""
        picks = mixed_draft.get_picks(Player.HOST)
        picks.clear()
        assert len(mixed_draft.get_picks(Player.HOST)) == 2

    def test_views_follow_appends(self, make_draft, simple_pairs, ban, aztecs, britons):
        draft = make_draft(simple_pairs)
        assert draft.get_bans_for_player(Player.HOST) == []
        draft.append_event(ban(Player.HOST, aztecs))
        assert draft.get_bans_for_player(Player.HOST) == [aztecs]
        draft.append_event(ban(Player.GUEST, britons))
        assert draft.get_bans_for_player(Player.GUEST) == [britons]

    def test_round_trip_through_json(self, mixed_draft):
        """A serialised draft replays to the same views."""
        restored = Draft.model_validate_json(mixed_draft.model_dump_json())
        assert restored.events == mixed_draft.events
        assert restored.get_snipes(Player.HOST) == mixed_draft.get_snipes(Player.HOST)


class TestAppendOnly:
    """The log only changes through append_event()."""

    def test_log_is_a_tuple(self, make_draft, simple_pairs, ban, aztecs):
        draft = make_draft(simple_pairs, [ban(Player.HOST, aztecs)])
        assert isinstance(draft.events, tuple)
        assert not hasattr(draft.events, "pop")

    def test_log_cannot_be_reassigned(self, make_draft, simple_pairs, ban, aztecs):
        draft = make_draft(simple_pairs, [ban(Player.HOST, aztecs)])
        with pytest.raises(AttributeError):
            draft.events = ()
        assert len(draft.events) == 1

    def test_preset_cannot_be_swapped(self):
        draft = Draft(preset=SIMPLE)
        with pytest.raises(AttributeError):
            draft.preset = Preset.from_pairs("one", [(Player.HOST, Action.PICK)])

    def test_other_fields_stay_assignable(self):
        draft = Draft(preset=SIMPLE)
        draft.name_host = "Alice"
        assert draft.name_host == "Alice"

    def test_construction_rejects_overfull_log(self, admin):
        one_turn = Preset.from_pairs("one", [(Player.HOST, Action.PICK)])
        with pytest.raises(ValidationError):
            Draft(preset=one_turn, events=[admin(Player.HOST, Action.PICK)] * 2)

    def test_construction_accepts_full_log(self, admin):
        one_turn = Preset.from_pairs("one", [(Player.HOST, Action.PICK)])
        draft = Draft(preset=one_turn, events=[admin(Player.HOST, Action.PICK)])
        assert draft.is_done()
        assert draft.get_global_bans() == []
