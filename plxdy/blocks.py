"""Blocks: instances of keys found in a document, with their sub-blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ranges import Position, Range
from .spec import KeySpec


@dataclass(eq=True)
class Block:
    """An instance of a key in the text.

    ``text`` holds the value lines without the key; ``range`` covers every
    line used by this block's own value.
    """

    key: KeySpec
    text: list[str]
    range: Range
    subblocks: list[Block] = field(default_factory=list)

    def push_text(self, line: str, line_index: int) -> None:
        """Append a line of value, extending the range to its end."""
        self.text.append(line)
        self.range = Range(self.range.start, Position(line_index, len(line)))

    def joined_text(self) -> str:
        """All value lines joined with newlines, then stripped."""
        return "\n".join(self.text).strip()

    def split_text(self, split_after_lines: int) -> tuple[str, str]:
        """Join and strip the lines before and after ``split_after_lines``."""
        if not 0 <= split_after_lines <= len(self.text):
            raise ValueError(
                f"cannot split {len(self.text)} lines after {split_after_lines}"
            )
        first = self.text[:split_after_lines]
        second = self.text[split_after_lines:]
        return "\n".join(first).strip(), "\n".join(second).strip()

    def __repr__(self) -> str:
        return (
            f"Block(key={self.key!r}, text={self.text!r}, "
            f"range={self.range}, subblocks={self.subblocks!r})"
        )