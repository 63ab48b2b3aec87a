"""Data words stored in memory: a digit, a letter, or a digit-letter pair."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementType(Enum):
    LETTER = "letter"
    DIGIT = "digit"
    COMBINATION = "combination"


@dataclass(frozen=True)
class Element:
    """One memory word; ``second`` is only meaningful for combinations."""

    first: str = "0"
    second: str = "0"
    type: ElementType = ElementType.DIGIT

    @classmethod
    def from_line(cls, line: str) -> Element:
        """Build an element from one line of a memory file."""
        if not line:
            raise ValueError("cannot build an element from an empty line")
        if len(line) == 1:
            kind = ElementType.DIGIT if "0" <= line <= "9" else ElementType.LETTER
            return cls(line, "0", kind)
        return cls(line[0], line[1], ElementType.COMBINATION)

    def __str__(self) -> str:
        if self.type is ElementType.COMBINATION:
            return self.first + self.second
        return self.first