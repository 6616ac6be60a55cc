"""The DY spec for PLX courses, and parsing of course files."""

from __future__ import annotations

from dataclasses import dataclass

from .blocks import Block
from .errors import ParseError
from .result import ParseResult, parse_with_spec
from .spec import KeySpec, ValidSpec, ValueType

# Course files are course.dy, skills live in skills.dy and exercises in exo.dy
COURSE_FILE = "course.dy"
SKILLS_FILE = "skills.dy"
EXO_FILE = "exo.dy"


@dataclass
class Course:
    """A course: its name, short code and learning goals."""

    name: str = ""
    code: str = ""
    goal: str = ""


GOAL_SPEC = KeySpec(
    id="goal",
    desc="The goal key describes the learning goals of this course.",
    subkeys=(),
    vt=ValueType.MULTILINE,
    once=True,
    required=True,
)
CODE_SPEC = KeySpec(
    id="code",
    desc="The code of the course is a shorter name of the course, under 10 letters usually.",
    subkeys=(),
    vt=ValueType.SINGLE_LINE,
    once=True,
    required=True,
)
COURSE_SPEC = KeySpec(
    id="course",
    desc="A PLX course is grouping skills and exos related to a common set of learning goals.",
    subkeys=(CODE_SPEC, GOAL_SPEC),
    vt=ValueType.SINGLE_LINE,
    once=True,
    required=True,
)
COURSES_SPEC = ValidSpec([COURSE_SPEC])


def course_from_block(block: Block) -> tuple[list[ParseError], Course]:
    """Build a course from a ``course`` block."""
    course = Course(name=block.joined_text())
    for subblock in block.subblocks:
        if subblock.key.id == CODE_SPEC.id:
            course.code = subblock.joined_text()
        if subblock.key.id == GOAL_SPEC.id:
            course.goal = "\n".join(subblock.text)
    return [], course


def parse_course(file_path: str | None, content: str) -> ParseResult[Course]:
    """Parse the content of a course file."""
    return parse_with_spec(COURSES_SPEC, course_from_block, file_path, content)