"""Errors reported while parsing a DY document."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import COMMENT_PREFIX
from .ranges import Range


class ParseErrorType:
    """Base of every kind of parse error; ``str()`` gives the message."""

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class WrongKeyPosition(ParseErrorType):
    """A key was found where its parent key is not."""

    key: str
    parent: str

    @property
    def message(self) -> str:
        return f"The '{self.key}' key can be only used under a `{self.parent}`"


@dataclass(frozen=True)
class DuplicatedKey(ParseErrorType):
    """A key allowed only once was repeated at the given level."""

    key: str
    level: int

    @property
    def message(self) -> str:
        where = "in the document root" if self.level == 0 else "at this level"
        return f"The '{self.key}' key can only be used once {where}"


@dataclass(frozen=True)
class InvalidMultilineContent(ParseErrorType):
    """Content followed a single-line key."""

    key: str

    @property
    def message(self) -> str:
        return (
            f"Invalid multiline content found after the '{self.key}' key "
            "which is single line"
        )


@dataclass(frozen=True)
class ContentOutOfKey(ParseErrorType):
    """Content found before any valid key."""

    @property
    def message(self) -> str:
        return (
            "This content is not associated to any valid key.\n"
            f"Hint: maybe this should be a comment starting with {COMMENT_PREFIX} "
            "or it needs a valid key as a prefix?"
        )


@dataclass(frozen=True)
class MissingRequiredKey(ParseErrorType):
    """A required key is absent."""

    key: str

    @property
    def message(self) -> str:
        return f"Missing required key '{self.key}'"


@dataclass(frozen=True)
class MissingRequiredValue(ParseErrorType):
    """A required key has an empty value."""

    key: str

    @property
    def message(self) -> str:
        return f"Missing a value for the required key '{self.key}'"


@dataclass(frozen=True)
class ValidationError(ParseErrorType):
    """An error raised while validating an entity built from a block."""

    text: str

    @property
    def message(self) -> str:
        return self.text


@dataclass(frozen=True)
class ParseError:
    """An error located in the document.

    Errors order by the start position of their range only.
    """

    range: Range
    error: ParseErrorType

    def _sort_key(self) -> tuple[int, int]:
        return (self.range.start.line, self.range.start.character)

    def __lt__(self, other: ParseError) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: ParseError) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: ParseError) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: ParseError) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return str(self.error)