from plxdy.course import Course, parse_course
from plxdy.errors import ContentOutOfKey, InvalidMultilineContent, ParseError
from plxdy.ranges import range_on_line_with_length
from plxdy.result import ParseResult


def test_can_parse_simple_valid_course():
    text = "course Programmation 1\ncode PRG1\ngoal Apprendre des bases solides du C++"
    assert parse_course("course.dy", text) == ParseResult(
        items=[
            Course(
                name="Programmation 1",
                code="PRG1",
                goal="Apprendre des bases solides du C++",
            )
        ],
        errors=[],
        file_path="course.dy",
        file_content=None,
    )


def test_parse_result_display_is_correct():
    text = "code YEP\ncourse PRG1\ngoal Learn C++\ncourse PRG2\ngoal hey"
    expected_output = """Found 1 item in course.dy with 3 errors.

Error at course.dy:0:0
code YEP
^^^^ The 'code' key can be only used under a `??`

Error at course.dy:1:0
course PRG1
| Missing required key 'code'

Error at course.dy:3:0
course PRG2
^^^^^^ The 'course' key can only be used once in the document root
"""
    result = parse_course("course.dy", text)
    assert str(result) == expected_output


def test_parse_result_display_is_also_correct():
    text = "course\ncode PRG1\ngoal Learn C++\n"
    expected_output = """Found 1 item in course.dy with 1 error.

Error at course.dy:0:6
course
      | Missing a value for the required key 'course'
"""
    result = parse_course("course.dy", text)
    assert str(result) == expected_output


def test_unknown_content_is_reported():
    text = (
        "// just a comment\n"
        "what's this file ??\n"
        "i don't know...\n"
        "\n"
        "course Programmation 1\n"
        "code PRG1\n"
        "oupsii\n"
        "goal hey"
    )
    result = parse_course("course.dy", text)
    assert result.errors == [
        ParseError(range_on_line_with_length(1, 19), ContentOutOfKey()),
        ParseError(range_on_line_with_length(2, 15), ContentOutOfKey()),
        ParseError(range_on_line_with_length(6, 6), InvalidMultilineContent("code")),
    ]
    assert result.items == [Course(name="Programmation 1", code="PRG1", goal="hey")]
    assert result.file_content == text
    assert "oupsii" in str(result)