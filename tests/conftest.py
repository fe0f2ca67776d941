"""
Pytest fixtures for civdraft tests.

Provides civilisations, event factories, and ready-to-play drafts.
"""

import pytest

from civdraft.models import (
    Action,
    ActionType,
    AdminEvent,
    Player,
    PlayerEvent,
    Preset,
    civilisation_by_name,
)
from civdraft.state import Draft, reset_event_bus


@pytest.fixture(autouse=True)
def fresh_event_bus():
    """Each test gets its own process-wide event bus."""
    reset_event_bus()
    yield
    reset_event_bus()


@pytest.fixture
def aztecs():
    return civilisation_by_name("Aztecs")


@pytest.fixture
def britons():
    return civilisation_by_name("Britons")


@pytest.fixture
def celts():
    return civilisation_by_name("Celts")


@pytest.fixture
def pick():
    """Factory for PICK player events."""
    def _pick(player, civilisation):
        return PlayerEvent(player=player, action_type=ActionType.PICK, civilisation=civilisation)
    return _pick


@pytest.fixture
def ban():
    """Factory for BAN player events."""
    def _ban(player, civilisation):
        return PlayerEvent(player=player, action_type=ActionType.BAN, civilisation=civilisation)
    return _ban


@pytest.fixture
def snipe():
    """Factory for SNIPE player events."""
    def _snipe(player, civilisation):
        return PlayerEvent(player=player, action_type=ActionType.SNIPE, civilisation=civilisation)
    return _snipe


@pytest.fixture
def admin():
    """Factory for admin events."""
    def _admin(player, action):
        return AdminEvent(player=player, action=action)
    return _admin


@pytest.fixture
def make_draft():
    """
    Factory for drafts.

    Takes (player, action) pairs, an optional list of events already in
    the log, and whether both players have joined.
    """
    def _make(pairs, events=None, ready=True):
        draft = Draft(preset=Preset.from_pairs("test", pairs))
        if ready:
            draft.set_player_name(Player.HOST, "Host")
            draft.set_player_name(Player.GUEST, "Guest")
        for event in events or []:
            draft.append_event(event)
        return draft
    return _make


@pytest.fixture
def simple_pairs():
    """BAN, BAN, PICK, PICK alternating HOST/GUEST."""
    return [
        (Player.HOST, Action.BAN),
        (Player.GUEST, Action.BAN),
        (Player.HOST, Action.PICK),
        (Player.GUEST, Action.PICK),
    ]
