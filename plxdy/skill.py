"""The DY spec for PLX skills, and parsing of skills files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .blocks import Block
from .errors import MissingRequiredValue, ParseError
from .ranges import range_on_line_part
from .result import ParseResult, parse_with_spec
from .spec import KeySpec, ValidSpec, ValueType


@dataclass
class Skill:
    """A skill with its description, exercise directory and subskills.

    The directory is not checked to exist.
    """

    name: str = ""
    description: str = ""
    directory: str = ""
    subskills: list[Skill] = field(default_factory=list)


DIR_SPEC = KeySpec(
    id="dir",
    desc=(
        "The directory where exos of this skill are stored. "
        "This directory must be unique among listed skills."
    ),
    subkeys=(),
    vt=ValueType.SINGLE_LINE,
    once=True,
    required=True,
)
SUBSKILL_SPEC = KeySpec(
    id="subskill",
    desc="The subskill is the same as a skill but must be more specific and focused.",
    subkeys=(),
    vt=ValueType.MULTILINE,
    once=False,
    required=False,
)
SKILL_SPEC = KeySpec(
    id="skill",
    desc=(
        "The skill is describing what students are expected to be able to do. "
        "Subskills can be used to define more specific inner skills.\n"
        "The first line is the skill name and following lines define the details of the skill."
    ),
    subkeys=(SUBSKILL_SPEC, DIR_SPEC),
    vt=ValueType.MULTILINE,
    once=False,
    required=True,
)
SKILLS_SPEC = ValidSpec([SKILL_SPEC])


def skill_from_block(block: Block) -> tuple[list[ParseError], Skill]:
    """Build a skill from a ``skill`` or ``subskill`` block.

    The first line is the name, the following lines the description.
    """
    errors: list[ParseError] = []
    name, description = block.split_text(1) if block.text else ("", "")
    skill = Skill(name=name, description=description)

    for subblock in block.subblocks:
        if subblock.key.id == DIR_SPEC.id:
            skill.directory = subblock.joined_text()
        if subblock.key.id == SUBSKILL_SPEC.id:
            if not subblock.joined_text():
                size = len(SUBSKILL_SPEC.id)
                errors.append(
                    ParseError(
                        range_on_line_part(subblock.range.start.line, size, size),
                        MissingRequiredValue(SUBSKILL_SPEC.id),
                    )
                )
            suberrors, subskill = skill_from_block(subblock)
            skill.subskills.append(subskill)
            errors.extend(suberrors)

    return errors, skill


def parse_skills(file_path: str | None, content: str) -> ParseResult[Skill]:
    """Parse the content of a skills file."""
    return parse_with_spec(SKILLS_SPEC, skill_from_block, file_path, content)