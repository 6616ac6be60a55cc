import pytest

from plxdy.blocks import Block
from plxdy.ranges import range_on_line_with_length, range_on_lines
from plxdy.spec import KeySpec, ValueType

SUBSKILL = KeySpec(id="subskill", desc="test", vt=ValueType.MULTILINE)
SKILL = KeySpec(
    id="skill",
    desc="test",
    subkeys=(SUBSKILL,),
    vt=ValueType.MULTILINE,
    required=True,
)
EXO = KeySpec(id="exo", desc="test", vt=ValueType.MULTILINE, once=True, required=True)


def test_push_text_extends_range_and_text():
    block = Block(SKILL, ["A"], range_on_line_with_length(2, 7))
    block.push_text("A desc", 4)
    block.push_text("A desc 2", 6)
    assert block.text == ["A", "A desc", "A desc 2"]
    assert block.range == range_on_lines(2, 6, 8)


def test_push_empty_line_ends_range_at_zero():
    block = Block(EXO, ["hey"], range_on_line_with_length(1, 7))
    block.push_text("a great instruction", 2)
    block.push_text("on several lines", 3)
    block.push_text("", 4)
    assert block.text == ["hey", "a great instruction", "on several lines", ""]
    assert block.range == range_on_lines(1, 4, 0)


def test_joined_text_strips_result():
    block = Block(SKILL, ["B", "B desc", ""], range_on_lines(8, 10, 6))
    assert block.joined_text() == "B\nB desc"


def test_joined_text_of_empty_value_is_empty():
    block = Block(SKILL, ["", ""], range_on_line_with_length(0, 5))
    assert block.joined_text() == ""


def test_split_text_after_first_line():
    block = Block(EXO, ["hey there", "some content"], range_on_lines(1, 2, 12))
    assert block.split_text(1) == ("hey there", "some content")


def test_split_text_with_nothing_after():
    block = Block(EXO, ["test"], range_on_line_with_length(0, 8))
    assert block.split_text(1) == ("test", "")


def test_split_text_strips_both_halves():
    block = Block(SKILL, ["A", "", "great desc", ""], range_on_lines(0, 3, 0))
    name, description = block.split_text(1)
    assert name == "A"
    assert description == "great desc"


def test_split_text_beyond_length_raises():
    block = Block(EXO, ["only"], range_on_line_with_length(0, 8))
    with pytest.raises(ValueError):
        block.split_text(2)


def test_blocks_compare_with_subblocks():
    sub = Block(SUBSKILL, ["B"], range_on_line_with_length(1, 10))
    a = Block(SKILL, ["A"], range_on_line_with_length(0, 7), [sub])
    b = Block(SKILL, ["A"], range_on_line_with_length(0, 7), [sub])
    c = Block(SKILL, ["A"], range_on_line_with_length(0, 7))
    assert a == b
    assert a != c


def test_repr_uses_short_range():
    block = Block(SKILL, ["A"], range_on_line_with_length(0, 7))
    assert str(block.range) in repr(block)
    assert "KeySpec 'skill'" in repr(block)