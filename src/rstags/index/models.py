"""Tag records produced by the declaration parser."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class TagKind(str, Enum):
    """Categories of declarations the scanner reports.

    Each kind maps to a ctags kind letter and name:
        FUNCTION -> f / fn    (functions and methods)
        LET      -> l / let   (local bindings)
        TYPE     -> t / type  (type aliases)
    """

    FUNCTION = "function"
    LET = "let"
    TYPE = "type"

    @property
    def letter(self) -> str:
        return _KIND_INFO[self][0]

    @property
    def kind_name(self) -> str:
        return _KIND_INFO[self][1]

    @property
    def description(self) -> str:
        return _KIND_INFO[self][2]

    @classmethod
    def from_letter(cls, letter: str) -> TagKind:
        for kind, (kind_letter, _, _) in _KIND_INFO.items():
            if kind_letter == letter:
                return kind
        raise ValueError(f"Unknown tag kind letter: {letter!r}")


_KIND_INFO: dict[TagKind, tuple[str, str, str]] = {
    TagKind.FUNCTION: ("f", "fn", "functions"),
    TagKind.LET: ("l", "let", "let"),
    TagKind.TYPE: ("t", "type", "types"),
}

ALL_KINDS: frozenset[TagKind] = frozenset(TagKind)


@dataclass(frozen=True, slots=True)
class Tag:
    """One discovered declaration."""

    name: str
    kind: TagKind
    line: int  # 1-based line of the name token
    offset: int  # byte offset of the name token
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.kind_name
        return data
