"""Positions and ranges in a document, counted in zero-based lines and characters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based line and character offset."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """A span between two positions, end exclusive."""

    start: Position
    end: Position

    def __str__(self) -> str:
        return (
            f"{self.start.line}:{self.start.character}"
            f"-{self.end.line}:{self.end.character}"
        )


def range_on_line_with_length(line: int, length: int) -> Range:
    """Range on a single line, from character 0 to ``length``."""
    return Range(Position(line, 0), Position(line, length))


def range_on_lines(line: int, line2: int, length: int) -> Range:
    """Range from the start of ``line`` to character ``length`` of ``line2``."""
    return Range(Position(line, 0), Position(line2, length))


def range_on_line_part(line: int, start: int, end: int) -> Range:
    """Range on a single line between two characters."""
    return Range(Position(line, start), Position(line, end))