"""Syntax analysis: cut content into classified lines, and lines into parts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .spec import KeySpec, ValidSpec, all_valid_keys

COMMENT_PREFIX = "//"
MARKDOWN_CODE_SNIPPETS_SEPARATORS = ("```", "~~~")


class LineKind(enum.Enum):
    """Category of a line after tokenization."""

    WITH_KEY = "with_key"
    COMMENT = "comment"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyPart:
    """The key at the start of a line."""

    text: str


@dataclass(frozen=True)
class ValuePart:
    """Any value on a line, after a key or not."""

    text: str


LinePart = Union[KeyPart, ValuePart]


@dataclass(frozen=True)
class Line:
    """A line of content with its index and category.

    ``key`` is set only for lines of kind ``WITH_KEY``; such a key is not yet
    verified to be at a valid position.
    """

    index: int
    text: str
    kind: LineType_ = None  # type: ignore[assignment]
    key: KeySpec | None = None

    def tokenize_parts(self) -> list[LinePart]:
        """Split the line into a key and its trimmed value, or a single raw value."""
        if self.kind is LineKind.WITH_KEY and self.key is not None:
            size = len(self.key.id)
            return [KeyPart(self.text[:size]), ValuePart(self.text[size:].strip())]
        return [ValuePart(self.text)]


LineType_ = LineKind


def line_starts_with_key(line: str, prefix: str) -> bool:
    """Return True if the line starts with prefix followed by nothing, a space or a newline."""
    if not line.startswith(prefix):
        return False
    if len(line) > len(prefix) and line[len(prefix)] not in (" ", "\n"):
        return False
    return True


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def tokenize_into_lines(spec: ValidSpec, content: str) -> list[Line]:
    """Classify every line of content as a comment, a line starting with a known key, or unknown.

    Everything inside markdown code snippets is left unknown.
    """
    keys_by_id = {key.id: key for key in all_valid_keys(spec)}
    inside_code_snippet = False
    lines: list[Line] = []

    for index, text in enumerate(_split_lines(content)):
        kind = LineKind.UNKNOWN
        key: KeySpec | None = None

        if text.startswith(MARKDOWN_CODE_SNIPPETS_SEPARATORS):
            inside_code_snippet = not inside_code_snippet

        if inside_code_snippet:
            pass
        elif text.startswith(COMMENT_PREFIX):
            kind = LineKind.COMMENT
        else:
            first_word = text.split(" ", 1)[0]
            candidate = keys_by_id.get(first_word)
            if candidate is not None and line_starts_with_key(text, candidate.id):
                kind = LineKind.WITH_KEY
                key = candidate

        lines.append(Line(index=index, text=text, kind=kind, key=key))

    return lines