"""Parse a document against a spec into entities, and report the outcome."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .blocks import Block
from .errors import ParseError
from .parser import tokenize_into_lines
from .semantic import build_blocks_tree
from .spec import ValidSpec

T = TypeVar("T")

BlockBuilder = Callable[[Block], "tuple[list[ParseError], T]"]

_RESET = "\x1b[0m"
_GREEN = "32"
_RED = "31"
_CYAN = "36"
_BLUE = "34"
_BOLD_RED = "1;31"


def _paint(text: str, code: str, color: bool) -> str:
    if not color or not text:
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def _content_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _counted(count: int, noun: str) -> str:
    """Write ``count`` followed by ``noun``, made plural when more than one."""
    suffix = "s" if count > 1 else ""
    return f"{count} {noun}{suffix}"


@dataclass
class ParseResult(Generic[T]):
    """The entities extracted from a document and the errors found on the way.

    ``file_content`` holds the document only when there are errors, so they
    can be shown in context.
    """

    items: list[T] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    file_path: str | None = None
    file_content: str | None = None

    def render(self, color: bool = False) -> str:
        """Describe the result for a terminal, optionally with ANSI colors."""
        where = f"in {self.file_path} " if self.file_path is not None else ""
        count = len(self.items)
        if not self.errors:
            return _paint(f"Found {count} items {where}with no error!", _GREEN, color)

        parts = [
            _paint(
                f"Found {_counted(count, 'item')} {where}"
                f"with {_counted(len(self.errors), 'error')}.\n",
                _RED,
                color,
            )
        ]
        lines = _content_lines(self.file_content) if self.file_content is not None else None

        for error in self.errors:
            start, end = error.range.start, error.range.end
            if self.file_path is not None:
                position = f"{self.file_path}:{start.line}:{start.character}"
            else:
                position = f"line {start.line}, char {start.character}"
            parts.append(_paint(f"\nError at {position}\n", _CYAN, color))

            context = "\n".join(lines[start.line : end.line + 1]) if lines is not None else ""
            parts.append(_paint(context, _BLUE, color) + "\n")

            width = end.character - start.character
            markers = "|" if width == 0 else "^" * width
            parts.append(" " * start.character + _paint(markers, _RED, color))
            parts.append(_paint(f" {error.error}", _BOLD_RED, color) + "\n")

        return "".join(parts)

    def __str__(self) -> str:
        return self.render(color=False)


def parse_with_spec(
    spec: ValidSpec,
    builder: Callable[[Block], tuple[list[ParseError], T]],
    file_path: str | None,
    content: str,
) -> ParseResult[T]:
    """Parse ``content`` following ``spec`` and turn each root block into an item.

    ``builder`` maps a block to ``(errors, item)``; its errors follow those
    of the blocks tree.
    """
    lines = tokenize_into_lines(spec, content)
    blocks, errors = build_blocks_tree(spec, lines)

    items: list[T] = []
    for block in blocks:
        new_errors, item = builder(block)
        errors.extend(new_errors)
        items.append(item)

    return ParseResult(
        items=items,
        errors=errors,
        file_path=file_path,
        file_content=content if errors else None,
    )