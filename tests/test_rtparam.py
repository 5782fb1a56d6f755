import pytest

from protonkit.rtparam import RTPair, RTVar, RTVarOpt, is_number


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("-5", True), ("", False), ("1a", False), ("1.5", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_pair_parse_multiple_values():
    pair = RTPair.parse("key|a|b")
    assert pair.key == "key"
    assert pair.values == ["a", "b"]
    assert pair.value == "a|b"
    assert pair.serialize() == "key|a|b"


def test_pair_parse_empty_line_uses_marker():
    pair = RTPair.parse("")
    assert pair.value == "[EMPTY]"
    assert pair.values == ["[EMPTY]"]


def test_pair_trailing_pipe_gives_no_value():
    pair = RTPair.parse("key|")
    assert pair.values == []
    assert RTVar([pair]).valid() is False


def test_pair_keeps_inner_empty_values():
    assert RTPair.parse("k||x").values == ["", "x"]


def test_pair_equality_uses_key_and_first_value():
    assert RTPair.parse("k|1|2") == RTPair.parse("k|1|3")
    assert RTPair.parse("k|1") != RTPair.parse("k|2")


def test_parse_and_get():
    var = RTVar.parse("action|log\nmsg|hello")
    assert len(var) == 2
    assert var.get("action") == "log"
    assert var.get("msg") == "hello"
    assert var.get("missing") == ""


def test_serialize_round_trip():
    text = "action|input\n|text|hi there\nnetID|12"
    assert RTVar.parse(text).serialize() == text


def test_empty_text_is_invalid():
    var = RTVar.parse("")
    assert len(var) == 0
    assert var.valid() is False


def test_set_changes_serialized_value():
    var = RTVar.parse("a|1\nb|2")
    var.set("a", "9")
    assert var.serialize() == "a|9\nb|2"


def test_set_missing_key_is_noop():
    var = RTVar.parse("a|1")
    var.set("z", "9")
    assert var.serialize() == "a|1"


def test_int_validation_and_access():
    var = RTVar.parse("netid|42\nuserid|-7\nname|bob")
    assert var.validate_int("netid")
    assert var.validate_ints(["netid", "userid"])
    assert not var.validate_ints(["netid", "name"])
    assert not var.validate_int("absent")
    assert var.get_int("netid") == 42
    assert var.get_long("userid") == -7


def test_get_int_missing_key_raises():
    with pytest.raises(KeyError):
        RTVar.parse("a|1").get_int("b")


def test_pair_at_out_of_range_returns_first():
    var = RTVar.parse("first|1\nsecond|2")
    assert var.pair_at(1).key == "second"
    assert var.pair_at(5).key == "first"
    assert var.pair_at(-1).key == "first"


def test_pair_at_empty_raises():
    with pytest.raises(IndexError):
        RTVar().pair_at(0)


def test_append_returns_stored_pair():
    var = RTVar()
    pair = var.append("x|y")
    assert var.find("x") is pair


def test_remove():
    var = RTVar.parse("a|1\nb|2\na|1")
    var.remove("a")
    assert var.serialize() == "b|2"
    var.remove("nothing")
    assert len(var) == 1


def test_rtvar_opt_builds_lines():
    builder = RTVarOpt("set_default_color|`o")
    builder.append("add_label|big|Title|left|")
    assert builder.get() == "set_default_color|`o\nadd_label|big|Title|left|"