"""Semantic analysis: build a tree of blocks from classified lines and check the hierarchy.

Lines that start with a key open a new block when the key is valid at the
current level. Unknown lines are appended to the last block when its key
takes multiline values. A key that is not valid at the current level ends
the current level, so the parent level gets a chance to accept it. At the
root, such a key is reported as misplaced. Once a level is complete, repeated
``once`` keys are dropped and reported. Finally, required keys and required
values are checked over the whole tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .blocks import Block
from .errors import (
    ContentOutOfKey,
    DuplicatedKey,
    InvalidMultilineContent,
    MissingRequiredKey,
    MissingRequiredValue,
    ParseError,
    WrongKeyPosition,
)
from .parser import Line, LineKind, ValuePart
from .ranges import (
    Position,
    Range,
    range_on_line_part,
    range_on_line_with_length,
)
from .spec import KeySpec, ValidSpec, ValueType

_UNKNOWN_PARENT = "??"


class _LineStream:
    """An iterator over lines that can look at the next line without consuming it."""

    def __init__(self, lines: Iterable[Line]) -> None:
        self._lines: Iterator[Line] = iter(lines)
        self._next: Line | None = next(self._lines, None)

    def peek(self) -> Line | None:
        return self._next

    def advance(self) -> None:
        self._next = next(self._lines, None)


def build_blocks_tree(
    spec: ValidSpec, lines: Iterable[Line]
) -> tuple[list[Block], list[ParseError]]:
    """Build the blocks tree for ``lines`` following ``spec``.

    Return the root blocks and the hierarchy errors, sorted by position.
    """
    stream = _LineStream(lines)
    blocks, errors = _build_subtree(stream, spec.keys, 0)
    _check_required(blocks, spec.keys, None, errors)
    errors.sort()
    return blocks, errors


def _new_block(line: Line, key: KeySpec) -> Block:
    text = [part.text for part in line.tokenize_parts() if isinstance(part, ValuePart)]
    return Block(
        key=key,
        text=text,
        range=Range(Position(line.index, 0), Position(line.index, len(line.text))),
    )


def _build_subtree(
    stream: _LineStream, specs: Sequence[KeySpec], level: int
) -> tuple[list[Block], list[ParseError]]:
    errors: list[ParseError] = []
    blocks: list[tuple[int, Block]] = []

    while (line := stream.peek()) is not None:
        if line.kind is LineKind.WITH_KEY and line.key is not None:
            key = line.key
            if any(candidate.id == key.id for candidate in specs):
                blocks.append((line.index, _new_block(line, key)))
            elif level == 0:
                errors.append(
                    ParseError(
                        range_on_line_with_length(line.index, len(key.id)),
                        WrongKeyPosition(key.id, _UNKNOWN_PARENT),
                    )
                )
            else:
                break
            stream.advance()
        elif line.kind is LineKind.COMMENT:
            stream.advance()
        else:
            has_content = bool(line.text.strip())
            if blocks:
                last = blocks[-1][1]
                if last.key.vt is ValueType.SINGLE_LINE:
                    if has_content:
                        errors.append(
                            ParseError(
                                range_on_line_with_length(line.index, len(line.text)),
                                InvalidMultilineContent(last.key.id),
                            )
                        )
                else:
                    last.push_text(line.text, line.index)
            elif has_content:
                errors.append(
                    ParseError(
                        range_on_line_with_length(line.index, len(line.text)),
                        ContentOutOfKey(),
                    )
                )
            stream.advance()

        upcoming = stream.peek()
        if upcoming is not None and upcoming.kind is LineKind.WITH_KEY and blocks:
            last = blocks[-1][1]
            if last.key.subkeys:
                subblocks, suberrors = _build_subtree(stream, last.key.subkeys, level + 1)
                errors.extend(suberrors)
                last.subblocks = subblocks

    once_keys_found: set[str] = set()
    kept: list[Block] = []
    for start_line, block in blocks:
        if block.key.once and block.key.id in once_keys_found:
            errors.append(
                ParseError(
                    range_on_line_with_length(start_line, len(block.key.id)),
                    DuplicatedKey(block.key.id, level),
                )
            )
            continue
        if block.key.once:
            once_keys_found.add(block.key.id)
        kept.append(block)

    return kept, errors


def _check_required(
    blocks: Sequence[Block],
    specs: Sequence[KeySpec],
    parent_range: Range | None,
    errors: list[ParseError],
) -> None:
    missing = [key.id for key in specs if key.required]

    for block in blocks:
        if block.key.required:
            if block.key.id in missing:
                missing.remove(block.key.id)
            if not block.joined_text():
                size = len(block.key.id)
                errors.append(
                    ParseError(
                        range_on_line_part(block.range.start.line, size, size),
                        MissingRequiredValue(block.key.id),
                    )
                )
        _check_required(block.subblocks, block.key.subkeys, block.range, errors)

    parent_line = parent_range.start.line if parent_range is not None else 0
    for key_id in missing:
        errors.append(
            ParseError(
                range_on_line_with_length(parent_line, 0),
                MissingRequiredKey(key_id),
            )
        )