"""Participants of a draft."""

from enum import Enum


class Player(str, Enum):
    """Who acts on a turn. NONE is used for administrative records."""
    HOST = "HOST"
    GUEST = "GUEST"
    NONE = "NONE"

    def opponent(self) -> "Player":
        """The other seat; NONE has no opponent."""
        if self is Player.HOST:
            return Player.GUEST
        if self is Player.GUEST:
            return Player.HOST
        return Player.NONE
