"""Tracked state of players and the world they are in."""

from __future__ import annotations

from dataclasses import dataclass, field

from protonkit.vector import Vector2


@dataclass(eq=False)
class Player:
    """A player seen in a world; identity is the (netid, userid) pair."""

    name: str = ""
    netid: int = -1
    userid: int = -1
    country: str = ""
    pos: Vector2 = field(default_factory=Vector2)
    invis: bool = False
    mod: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.netid == other.netid and self.userid == other.userid


@dataclass
class World:
    """A world with its players and the local player."""

    name: str = ""
    players: list[Player] = field(default_factory=list)
    local: Player = field(default_factory=Player)
    connected: bool = False