import struct

import pytest

from protonkit.variant import VariantList, VarType, Variant
from protonkit.vector import Rect, Vector2, Vector3


def test_default_is_unused():
    v = Variant()
    assert v.kind is VarType.UNUSED
    assert v.describe() == "unused"


def test_type_inference():
    assert Variant(1.5).kind is VarType.FLOAT
    assert Variant(7).kind is VarType.INT32
    assert Variant("abc").kind is VarType.STRING
    assert Variant(Vector2(1, 2)).kind is VarType.VECTOR2
    assert Variant(Vector3(1, 2, 3)).kind is VarType.VECTOR3
    assert Variant(Rect(1, 2, 3, 4)).kind is VarType.RECT


def test_explicit_uint32_wraps():
    v = Variant(-1, VarType.UINT32)
    assert v.value == 0xFFFFFFFF


def test_uint32_subtraction_wraps():
    result = Variant(0, VarType.UINT32) - Variant(1, VarType.UINT32)
    assert result.kind is VarType.UINT32
    assert result.value == 0xFFFFFFFF


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        Variant(object())


def test_entity_cannot_hold_value():
    with pytest.raises(ValueError):
        Variant(1, VarType.ENTITY)


def test_reset():
    v = Variant("x")
    v.reset()
    assert v == Variant()


def test_add_same_type():
    assert (Variant(2) + Variant(3)).value == 5
    assert (Variant("ab") + Variant("cd")).value == "abcd"
    assert (Variant(Vector2(1, 2)) + Variant(Vector2(3, 4))).value == Vector2(4, 6)


def test_add_mismatched_types_keeps_left():
    left = Variant(2)
    result = left + Variant(1.0)
    assert result == left


def test_rect_not_added():
    r = Variant(Rect(1, 2, 3, 4))
    assert (r + Variant(Rect(1, 1, 1, 1))).value == Rect(1, 2, 3, 4)


def test_string_not_subtracted():
    s = Variant("abc")
    assert (s - Variant("c")).value == "abc"


def test_equality_rules():
    assert Variant() == Variant()
    assert Variant(1) != Variant(1, VarType.UINT32)
    assert Variant(1.5) == Variant(1.5)
    assert Variant(Vector3(1, 2, 3)) == Variant(Vector3(1, 2, 3))


def test_float_stored_single_precision():
    v = Variant(0.1)
    assert v.value == struct.unpack("<f", struct.pack("<f", 0.1))[0]


def test_describe_float_and_vector():
    assert Variant(1.5).describe() == "1.500000"
    assert Variant(Vector2(1, 2)).describe() == "x: 1.000000 y: 2.000000"


def test_copy_is_independent():
    original = Variant(Vector2(1, 2))
    copy = Variant(original)
    copy.value.x = 9
    assert original.value == Vector2(1, 2)


def test_serialize_float_bytes():
    data = VariantList(Variant(1.0)).serialize()
    assert data == b"\x01\x00\x01" + struct.pack("<f", 1.0)


def test_serialize_string_bytes():
    data = VariantList("hi").serialize()
    assert data == b"\x01\x00\x02" + struct.pack("<I", 2) + b"hi"


def test_empty_list_serializes_to_zero_count():
    lst = VariantList()
    assert lst.serialize() == b"\x00"
    assert lst.mem_needed() == 1


def test_mem_needed_matches_serialized_length():
    lst = VariantList("OnConsoleMessage", 5, Variant(3, VarType.UINT32), 2.5,
                      Vector2(1, 2), Vector3(1, 2, 3), Rect(1, 2, 3, 4))
    assert lst.mem_needed() == len(lst.serialize())


def test_round_trip_all_types():
    lst = VariantList("text", -5, Variant(7, VarType.UINT32), 2.5,
                      Vector2(1, 2), Vector3(1, 2, 3), Rect(1, 2, 3, 4))
    decoded = VariantList.deserialize(lst.serialize())
    for index in range(len(lst)):
        assert decoded[index] == lst[index]


def test_round_trip_sparse_slots():
    lst = VariantList()
    lst[3] = "only"
    decoded = VariantList.deserialize(lst.serialize())
    assert decoded[3].value == "only"
    assert decoded[0].kind is VarType.UNUSED


def test_deserialize_ignores_trailing_bytes():
    data = VariantList(42).serialize()
    assert VariantList.deserialize(data + b"junk")[0].value == 42


def test_deserialize_truncated_raises():
    data = VariantList("hello").serialize()
    with pytest.raises(ValueError):
        VariantList.deserialize(data[:-1])


def test_deserialize_unknown_type_raises():
    with pytest.raises(ValueError):
        VariantList.deserialize(b"\x01\x00\x06")


def test_deserialize_bad_index_raises():
    with pytest.raises(ValueError):
        VariantList.deserialize(b"\x01\x09\x09" + struct.pack("<i", 1))


def test_too_many_params_raises():
    with pytest.raises(ValueError):
        VariantList(*range(8))


def test_describe_list():
    lst = VariantList("a", 2)
    assert lst.describe() == "param 0: a\nparam 1: 2\n"
    lst.reset()
    assert lst.describe() == "(none)"