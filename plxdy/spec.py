"""Core types describing a DY specification: the structure of a file to parse."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


class ValueType(enum.Enum):
    """How many lines the value of a key may span."""

    SINGLE_LINE = "single_line"
    MULTILINE = "multiline"


@dataclass(frozen=True, repr=False)
class KeySpec:
    """The specification of a single key.

    ``subkeys`` are the keys that may only appear under this key. ``once``
    forbids repeating the key under the same parent. ``required`` demands at
    least one instance wherever the key may appear, with a non-empty value.
    """

    id: str
    desc: str = ""
    subkeys: tuple[KeySpec, ...] = field(default=())
    vt: ValueType = ValueType.SINGLE_LINE
    once: bool = False
    required: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.subkeys, tuple):
            object.__setattr__(self, "subkeys", tuple(self.subkeys))

    def __repr__(self) -> str:
        return f"KeySpec {self.id!r}"

    def is_entity(self) -> bool:
        """Return True when the key has subkeys."""
        return bool(self.subkeys)


class InvalidSpecError(ValueError):
    """Raised when a specification is semantically invalid."""


class ValidSpec:
    """A list of root keys, checked to be non-empty with unique identifiers."""

    def __init__(self, keys: Iterable[KeySpec]) -> None:
        self.keys: tuple[KeySpec, ...] = tuple(keys)
        if not self.keys:
            raise InvalidSpecError("The spec cannot be empty")
        self._check_unique_ids(self.keys, set())

    @classmethod
    def _check_unique_ids(cls, specs: Sequence[KeySpec], known: set[str]) -> None:
        for key_spec in specs:
            if key_spec.id in known:
                raise InvalidSpecError(f"Duplicated key identifier '{key_spec.id}'")
            known.add(key_spec.id)
            if key_spec.subkeys:
                cls._check_unique_ids(key_spec.subkeys, known)

    def __iter__(self) -> Iterator[KeySpec]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidSpec):
            return NotImplemented
        return self.keys == other.keys

    def __hash__(self) -> int:
        return hash(self.keys)

    def __repr__(self) -> str:
        return f"ValidSpec({list(self.keys)!r})"


def all_valid_keys(spec: Iterable[KeySpec]) -> list[KeySpec]:
    """Flatten a spec: the keys of this level first, then those of every subtree."""
    keys = list(spec)
    flattened = list(keys)
    for key in keys:
        flattened.extend(all_valid_keys(key.subkeys))
    return flattened