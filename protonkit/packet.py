"""Game packet layouts and message type identifiers."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import ClassVar


class PacketType(IntEnum):
    """Kinds of game update packet."""

    STATE = 0
    CALL_FUNCTION = 1
    UPDATE_STATUS = 2
    TILE_CHANGE_REQUEST = 3
    SEND_MAP_DATA = 4
    SEND_TILE_UPDATE_DATA = 5
    SEND_TILE_UPDATE_DATA_MULTIPLE = 6
    TILE_ACTIVATE_REQUEST = 7
    TILE_APPLY_DAMAGE = 8
    SEND_INVENTORY_STATE = 9
    ITEM_ACTIVATE_REQUEST = 10
    ITEM_ACTIVATE_OBJECT_REQUEST = 11
    SEND_TILE_TREE_STATE = 12
    MODIFY_ITEM_INVENTORY = 13
    ITEM_CHANGE_OBJECT = 14
    SEND_LOCK = 15
    SEND_ITEM_DATABASE_DATA = 16
    SEND_PARTICLE_EFFECT = 17
    SET_ICON_STATE = 18
    ITEM_EFFECT = 19
    SET_CHARACTER_STATE = 20
    PING_REPLY = 21
    PING_REQUEST = 22
    GOT_PUNCHED = 23
    APP_CHECK_RESPONSE = 24
    APP_INTEGRITY_FAIL = 25
    DISCONNECT = 26
    BATTLE_JOIN = 27
    BATTLE_EVEN = 28
    USE_DOOR = 29
    SEND_PARENTAL = 30
    GONE_FISHIN = 31
    STEAM = 32
    PET_BATTLE = 33
    NPC = 34
    SPECIAL = 35
    SEND_PARTICLE_EFFECT_V2 = 36
    GAME_ACTIVE_ARROW_TO_ITEM = 37
    GAME_SELECT_TILE_INDEX = 38


class NetMessageType(IntEnum):
    """Kinds of top-level network message."""

    UNKNOWN = 0
    SERVER_HELLO = 1
    GENERIC_TEXT = 2
    GAME_MESSAGE = 3
    GAME_PACKET = 4
    ERROR = 5
    TRACK = 6
    CLIENT_LOG_REQUEST = 7
    CLIENT_LOG_RESPONSE = 8


_UPDATE_FORMAT = struct.Struct("<4B3ifi5f4I")
_TEXT_HEADER = struct.Struct("<i")


@dataclass
class GameUpdatePacket:
    """Fixed-layout game update packet (little-endian, packed)."""

    SIZE: ClassVar[int] = _UPDATE_FORMAT.size

    type: int = 0
    netid: int = 0
    jump_amount: int = 0
    count: int = 0
    player_flags: int = 0
    item: int = 0
    packet_flags: int = 0
    struct_flags: float = 0.0
    int_data: int = 0
    vec_x: float = 0.0
    vec_y: float = 0.0
    vec2_x: float = 0.0
    vec2_y: float = 0.0
    particle_time: float = 0.0
    state1: int = 0
    state2: int = 0
    data_size: int = 0
    data: int = 0

    def pack(self) -> bytes:
        """Encode the packet into its wire layout."""
        try:
            return _UPDATE_FORMAT.pack(*astuple(self))
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> GameUpdatePacket:
        """Decode a packet from the start of data; trailing bytes are ignored."""
        if len(data) < cls.SIZE:
            raise ValueError(f"need at least {cls.SIZE} bytes, got {len(data)}")
        return cls(*_UPDATE_FORMAT.unpack_from(data))


@dataclass
class GameTextPacket:
    """Message carrying a type word followed by NUL-terminated text."""

    MIN_SIZE: ClassVar[int] = _TEXT_HEADER.size + 1

    type: int = 0
    text: str = ""

    def pack(self) -> bytes:
        """Encode the message with a trailing NUL."""
        try:
            header = _TEXT_HEADER.pack(self.type)
        except struct.error as exc:
            raise ValueError(f"type out of range: {exc}") from exc
        return header + self.text.encode("utf-8") + b"\0"

    @classmethod
    def unpack(cls, data: bytes) -> GameTextPacket:
        """Decode a message; the text ends at the first NUL or at the end of data."""
        if len(data) < cls.MIN_SIZE:
            raise ValueError(f"need at least {cls.MIN_SIZE} bytes, got {len(data)}")
        (kind,) = _TEXT_HEADER.unpack_from(data)
        body = bytes(data[_TEXT_HEADER.size:]).split(b"\0", 1)[0]
        return cls(kind, body.decode("utf-8", errors="replace"))