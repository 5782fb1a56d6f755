"""Tagged variant values and the compact binary list format that carries them."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any

from protonkit.vector import Rect, Vector2, Vector3

MAX_PARAMS = 7

_FLOAT = struct.Struct("<f")
_UINT32 = struct.Struct("<I")
_INT32 = struct.Struct("<i")
_VEC2 = struct.Struct("<2f")
_VEC3 = struct.Struct("<3f")
_RECT = struct.Struct("<4f")


class VarType(IntEnum):
    """Type tag of a variant, as written on the wire."""

    UNUSED = 0
    FLOAT = 1
    STRING = 2
    VECTOR2 = 3
    VECTOR3 = 4
    UINT32 = 5
    ENTITY = 6
    COMPONENT = 7
    RECT = 8
    INT32 = 9


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return _FLOAT.unpack(_FLOAT.pack(float(value)))[0]


def _i32(value: int) -> int:
    value = int(value) & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _u32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _as_vector2(value: Any) -> Vector2:
    x, y = (value.x, value.y) if isinstance(value, Vector2) else value
    return Vector2(_f32(x), _f32(y))


def _as_vector3(value: Any) -> Vector3:
    x, y, z = (value.x, value.y, value.z) if isinstance(value, Vector3) else value
    return Vector3(_f32(x), _f32(y), _f32(z))


def _as_rect(value: Any) -> Rect:
    x, y, w, h = (value.x, value.y, value.w, value.h) if isinstance(value, Rect) else value
    return Rect(_f32(x), _f32(y), _f32(w), _f32(h))


_COERCE = {
    VarType.FLOAT: _f32,
    VarType.STRING: str,
    VarType.VECTOR2: _as_vector2,
    VarType.VECTOR3: _as_vector3,
    VarType.UINT32: _u32,
    VarType.INT32: _i32,
    VarType.RECT: _as_rect,
}

_FIXED_CODECS: dict[VarType, struct.Struct] = {
    VarType.FLOAT: _FLOAT,
    VarType.UINT32: _UINT32,
    VarType.INT32: _INT32,
    VarType.VECTOR2: _VEC2,
    VarType.VECTOR3: _VEC3,
    VarType.RECT: _RECT,
}


def _infer_kind(value: Any) -> VarType:
    if isinstance(value, float):
        return VarType.FLOAT
    if isinstance(value, int):
        return VarType.INT32
    if isinstance(value, str):
        return VarType.STRING
    if isinstance(value, Vector2):
        return VarType.VECTOR2
    if isinstance(value, Vector3):
        return VarType.VECTOR3
    if isinstance(value, Rect):
        return VarType.RECT
    raise TypeError(f"cannot hold a value of type {type(value).__name__}")


def _fmt(value: float) -> str:
    return "%f" % value


class Variant:
    """A value of one of a few fixed types, or unused."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None, kind: VarType | None = None) -> None:
        self.kind = VarType.UNUSED
        self.value: Any = None
        if value is not None or kind is not None:
            self.set(value, kind)

    def reset(self) -> None:
        """Mark the variant unused."""
        self.kind = VarType.UNUSED
        self.value = None

    def set(self, value: Any, kind: VarType | None = None) -> None:
        """Store value; the type is taken from kind or inferred from value."""
        if isinstance(value, Variant):
            self.kind = value.kind
            self.value = _copy_value(value.kind, value.value)
            return
        if kind is None:
            kind = _infer_kind(value)
        kind = VarType(kind)
        if kind is VarType.UNUSED:
            self.reset()
            return
        coerce = _COERCE.get(kind)
        if coerce is None:
            raise ValueError(f"variant type {kind.name} cannot hold a value")
        if value is None:
            raise ValueError(f"variant type {kind.name} needs a value")
        self.value = coerce(value)
        self.kind = kind

    def describe(self) -> str:
        """Human-readable rendering of the value."""
        kind, value = self.kind, self.value
        if kind is VarType.FLOAT:
            return _fmt(value)
        if kind is VarType.STRING:
            return value
        if kind is VarType.VECTOR2:
            return f"x: {_fmt(value.x)} y: {_fmt(value.y)}"
        if kind is VarType.VECTOR3:
            return f"x: {_fmt(value.x)} y: {_fmt(value.y)} z: {_fmt(value.z)}"
        if kind in (VarType.UINT32, VarType.INT32):
            return str(value)
        if kind is VarType.RECT:
            return f"x: {_fmt(value.x)} y: {_fmt(value.y)} w: {_fmt(value.w)} h: {_fmt(value.h)}"
        return "unused"

    def __add__(self, other: Variant) -> Variant:
        """Sum of two variants of the same type; otherwise a copy of self."""
        result = Variant(self)
        if isinstance(other, Variant) and self.kind is other.kind and self.kind in (
            VarType.FLOAT,
            VarType.STRING,
            VarType.VECTOR2,
            VarType.VECTOR3,
            VarType.UINT32,
            VarType.INT32,
        ):
            result.set(self.value + other.value, self.kind)
        return result

    def __sub__(self, other: Variant) -> Variant:
        """Difference of two variants of the same numeric type; otherwise a copy of self."""
        result = Variant(self)
        if isinstance(other, Variant) and self.kind is other.kind and self.kind in (
            VarType.FLOAT,
            VarType.VECTOR2,
            VarType.VECTOR3,
            VarType.UINT32,
            VarType.INT32,
        ):
            result.set(self.value - other.value, self.kind)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is VarType.UNUSED:
            return True
        if self.kind in (VarType.ENTITY, VarType.COMPONENT):
            return False
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Variant({self.value!r}, VarType.{self.kind.name})"


def _copy_value(kind: VarType, value: Any) -> Any:
    coerce = _COERCE.get(kind)
    return coerce(value) if coerce is not None and value is not None else value


def _encode_string(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _payload_size(variant: Variant) -> int:
    if variant.kind is VarType.STRING:
        return len(_encode_string(variant.value)) + 4
    codec = _FIXED_CODECS.get(variant.kind)
    return codec.size if codec else 0


class VariantList:
    """A fixed list of parameter slots, each holding a variant."""

    def __init__(self, *values: Any) -> None:
        if len(values) > MAX_PARAMS:
            raise ValueError(f"at most {MAX_PARAMS} parameters, got {len(values)}")
        self._slots = [Variant() for _ in range(MAX_PARAMS)]
        for index, value in enumerate(values):
            self[index] = value

    def __getitem__(self, index: int) -> Variant:
        return self._slots[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._slots[index] = Variant(value)

    def __len__(self) -> int:
        return MAX_PARAMS

    def reset(self) -> None:
        """Mark every slot unused."""
        for slot in self._slots:
            slot.reset()

    def mem_needed(self) -> int:
        """Number of bytes the serialized form takes."""
        sizes = [size for size in map(_payload_size, self._slots) if size > 0]
        return sum(sizes) + 1 + 2 * len(sizes)

    def serialize(self) -> bytes:
        """Encode the used slots: a count byte, then index, type and payload per slot."""
        parts = []
        for index, slot in enumerate(self._slots):
            if slot.kind is VarType.STRING:
                raw = _encode_string(slot.value)
                parts.append(bytes((index, slot.kind)) + _UINT32.pack(len(raw)) + raw)
                continue
            codec = _FIXED_CODECS.get(slot.kind)
            if codec is None:
                continue
            value = slot.value
            if slot.kind is VarType.VECTOR2:
                payload = codec.pack(value.x, value.y)
            elif slot.kind is VarType.VECTOR3:
                payload = codec.pack(value.x, value.y, value.z)
            elif slot.kind is VarType.RECT:
                payload = codec.pack(value.x, value.y, value.w, value.h)
            else:
                payload = codec.pack(value)
            parts.append(bytes((index, slot.kind)) + payload)
        return bytes((len(parts),)) + b"".join(parts)

    @classmethod
    def deserialize(cls, data: bytes) -> VariantList:
        """Decode a list from the start of data; trailing bytes are ignored."""
        view = memoryview(bytes(data))
        result = cls()

        def take(size: int, offset: int) -> memoryview:
            if offset + size > len(view):
                raise ValueError("variant list data is truncated")
            return view[offset:offset + size]

        pos = 0
        (count,) = take(1, pos)
        pos += 1
        for _ in range(count):
            index, type_byte = take(2, pos)
            pos += 2
            if index >= MAX_PARAMS:
                raise ValueError(f"parameter index {index} out of range")
            try:
                kind = VarType(type_byte)
            except ValueError:
                raise ValueError(f"unknown variant type {type_byte}") from None
            if kind is VarType.STRING:
                (length,) = _UINT32.unpack(take(4, pos))
                pos += 4
                raw = bytes(take(length, pos))
                pos += length
                result._slots[index].set(raw.decode("utf-8", "surrogateescape"), kind)
                continue
            codec = _FIXED_CODECS.get(kind)
            if codec is None:
                raise ValueError(f"variant type {kind.name} cannot be decoded")
            fields = codec.unpack(take(codec.size, pos))
            pos += codec.size
            value = fields[0] if len(fields) == 1 else fields
            result._slots[index].set(value, kind)
        return result

    def describe(self) -> str:
        """One line per used slot, or "(none)" if all are unused."""
        text = "".join(
            f"param {index}: {slot.describe()}\n"
            for index, slot in enumerate(self._slots)
            if slot.kind is not VarType.UNUSED
        )
        return text or "(none)"

    def __repr__(self) -> str:
        return f"VariantList({self._slots!r})"