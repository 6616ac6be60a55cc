import re

from plxdy.blocks import Block
from plxdy.errors import (
    InvalidMultilineContent,
    MissingRequiredValue,
    ParseError,
    ValidationError,
)
from plxdy.ranges import range_on_line_part, range_on_line_with_length
from plxdy.result import ParseResult, parse_with_spec
from plxdy.spec import KeySpec, ValidSpec, ValueType

TAG = KeySpec("tag", "test", (), ValueType.SINGLE_LINE, False, False)
ITEM = KeySpec("item", "test", (TAG,), ValueType.MULTILINE, False, True)
SPEC = ValidSpec([ITEM])

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def text_builder(block: Block):
    return [], block.joined_text()


def failing_builder(block: Block):
    error = ParseError(
        range_on_line_with_length(block.range.start.line, len(block.key.id)),
        ValidationError("bad"),
    )
    return [error], block.joined_text()


def test_items_without_errors():
    result = parse_with_spec(SPEC, text_builder, "list.dy", "item first\nitem second\n")
    assert result.items == ["first", "second"]
    assert result.errors == []
    assert result.file_content is None
    assert result.file_path == "list.dy"
    assert str(result) == "Found 2 items in list.dy with no error!"


def test_builder_errors_follow_tree_errors_in_order():
    content = "item a\ntag x\nmore\n"
    result = parse_with_spec(SPEC, failing_builder, None, content)
    assert result.items == ["a"]
    assert result.errors == [
        ParseError(range_on_line_with_length(2, 4), InvalidMultilineContent("tag")),
        ParseError(range_on_line_with_length(0, 4), ValidationError("bad")),
    ]
    assert result.file_content == content


def test_render_without_file_path():
    content = "item a\ntag x\nmore\n"
    result = parse_with_spec(SPEC, text_builder, None, content)
    output = result.render()
    lines = output.split("\n")
    assert lines[0] == "Found 1 item with 1 error."
    assert lines[1] == ""
    assert lines[2] == "Error at line 2, char 0"
    assert lines[3] == "more"
    assert lines[4] == "^^^^ " + str(result.errors[0].error)
    assert output.endswith("\n")


def test_render_zero_width_range_uses_bar():
    result = parse_with_spec(SPEC, text_builder, None, "item\n")
    assert result.errors == [
        ParseError(range_on_line_part(0, 4, 4), MissingRequiredValue("item"))
    ]
    lines = result.render().split("\n")
    assert lines[3] == "item"
    assert lines[4] == " " * 4 + "| " + str(MissingRequiredValue("item"))


def test_colored_render_only_adds_ansi_codes():
    result = parse_with_spec(SPEC, text_builder, "list.dy", "item a\ntag x\nmore\n")
    colored = result.render(color=True)
    assert "\x1b[" in colored
    assert ANSI.sub("", colored) == result.render(color=False)
    assert str(result) == result.render(color=False)


def test_colored_render_without_errors():
    result = ParseResult(items=[1], errors=[], file_path=None, file_content=None)
    colored = result.render(color=True)
    assert colored.startswith("\x1b[")
    assert ANSI.sub("", colored) == str(result)