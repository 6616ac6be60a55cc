"""The DY spec for PLX exercises, and parsing of exercise files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from .blocks import Block
from .errors import MissingRequiredValue, ParseError, ValidationError
from .ranges import range_on_line_part
from .result import ParseResult, parse_with_spec
from .spec import KeySpec, ValidSpec, ValueType

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_EXIT_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")

ERROR_CANNOT_PARSE_EXIT_CODE = (
    "Couldn't parse the given value as the program's exit code, "
    "which is an unsigned 32 bits integer."
)


@dataclass(frozen=True)
class See:
    """Assert that the program's standard output contains this text."""

    text: str


@dataclass(frozen=True)
class Type:
    """Type this text in the terminal, followed by a newline."""

    text: str


TermAction = Union[See, Type]


@dataclass
class Check:
    """An automated test: arguments, expected exit code and a sequence of actions."""

    name: str = ""
    args: list[str] = field(default_factory=list)
    exit: int | None = None
    sequence: list[TermAction] = field(default_factory=list)


@dataclass
class Exo:
    """An exercise with its instruction and checks."""

    name: str = ""
    instruction: str = ""
    checks: list[Check] = field(default_factory=list)


ARGS_SPEC = KeySpec(
    id="args",
    desc=(
        "The command line arguments passed to the exo program, the space is used "
        "to split the list of arguments. No quotes or space inside argument is "
        "supported at the moment."
    ),
    subkeys=(),
    vt=ValueType.SINGLE_LINE,
    once=True,
    required=False,
)
SEE_SPEC = KeySpec(
    id="see",
    desc=(
        "The `see` assertion asserts that the standard output of the exo program "
        "contains the given text. Values around that text are permitted."
    ),
    subkeys=(),
    vt=ValueType.MULTILINE,
    once=False,
    required=True,
)
TYPE_SPEC = KeySpec(
    id="type",
    desc=(
        "The `type` action simulate typing in the terminal and hitting enter. It "
        "inject the given text in the standard input at once after appending a "
        "`\\n` at the end of the text."
    ),
    subkeys=(),
    vt=ValueType.SINGLE_LINE,
    once=False,
    required=False,
)
EXIT_SPEC = KeySpec(
    id="exit",
    desc=(
        "Assert the value of the exit code (also named exit status). By default, "
        "this is checked to be 0, you can define another value to assert the "
        "program has failed with a specific exit code."
    ),
    subkeys=(),
    vt=ValueType.SINGLE_LINE,
    once=True,
    required=False,
)
CHECK_SPEC = KeySpec(
    id="check",
    desc="Describe a `check`, which is a basic automated test.",
    subkeys=(ARGS_SPEC, SEE_SPEC, TYPE_SPEC, EXIT_SPEC),
    vt=ValueType.SINGLE_LINE,
    once=False,
    required=True,
)
EXO_SPEC = KeySpec(
    id="exo",
    desc=(
        "Define a new exercise (exo is shortcut for exercise) with a name and "
        "optionnal instruction."
    ),
    subkeys=(CHECK_SPEC,),
    vt=ValueType.MULTILINE,
    once=True,
    required=True,
)
EXOS_SPEC = ValidSpec([EXO_SPEC])


def _parse_exit_code(text: str) -> int | None:
    if not _EXIT_CODE_PATTERN.fullmatch(text):
        return None
    code = int(text)
    if not _INT32_MIN <= code <= _INT32_MAX:
        return None
    return code


def split_args_string(line: str) -> list[str]:
    """Split arguments on every single space; an empty line gives no argument."""
    if not line:
        return []
    return line.split(" ")


def _check_from_block(block: Block, errors: list[ParseError]) -> Check:
    check = Check(name=block.joined_text())
    for subblock in block.subblocks:
        key_id = subblock.key.id
        if key_id == ARGS_SPEC.id:
            args_text = subblock.joined_text()
            if not args_text:
                size = len(ARGS_SPEC.id)
                errors.append(
                    ParseError(
                        range_on_line_part(subblock.range.start.line, size, size),
                        MissingRequiredValue(key_id),
                    )
                )
            else:
                check.args = split_args_string(args_text)
        elif key_id == EXIT_SPEC.id:
            check.exit = _parse_exit_code(subblock.joined_text())
            if check.exit is None:
                errors.append(
                    ParseError(
                        range_on_line_part(
                            subblock.range.start.line,
                            subblock.range.start.character + len(key_id) + 1,
                            subblock.range.end.character,
                        ),
                        ValidationError(ERROR_CANNOT_PARSE_EXIT_CODE),
                    )
                )
        elif key_id == TYPE_SPEC.id:
            check.sequence.append(Type(subblock.joined_text()))
        elif key_id == SEE_SPEC.id:
            check.sequence.append(See(subblock.joined_text()))
    return check


def exo_from_block(block: Block) -> tuple[list[ParseError], Exo]:
    """Build an exercise from an ``exo`` block.

    The first line is the name, the following lines the instruction.
    """
    errors: list[ParseError] = []
    name, instruction = block.split_text(1) if block.text else ("", "")
    exo = Exo(name=name, instruction=instruction)
    for subblock in block.subblocks:
        if subblock.key.id == CHECK_SPEC.id:
            exo.checks.append(_check_from_block(subblock, errors))
    return errors, exo


def parse_exos(file_path: str | None, content: str) -> ParseResult[Exo]:
    """Parse the content of an exercise file."""
    return parse_with_spec(EXOS_SPEC, exo_from_block, file_path, content)