"""Set-associative cache with FIFO replacement inside each set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .address import NUM_SETS, SET_LINES, WORDS_PER_BLOCK
from .element import Element


def _empty_block() -> list[Element]:
    return [Element() for _ in range(WORDS_PER_BLOCK)]


@dataclass
class CacheLine:
    """One cache line: valid bit, tag and a block of data."""

    valid: bool = False
    tag: int = 0
    data: list[Element] = field(default_factory=_empty_block)

    def fill(self, tag: int, data: Iterable[Element]) -> None:
        self.valid = True
        self.tag = tag
        self.data = list(data)

    def update(self, tag: int, offset: int, element: Element) -> None:
        self.valid = True
        self.tag = tag
        self.data[offset] = element

    def matches(self, tag: int) -> bool:
        return self.valid and self.tag == tag

    def __str__(self) -> str:
        words = ", ".join(str(e) for e in self.data)
        return f"| Valid : {int(self.valid)} | Tag: {self.tag} | Data: [{words}] |"


class CacheSet:
    """A group of lines sharing one index, replaced in first-in first-out order."""

    def __init__(self) -> None:
        self.lines = [CacheLine() for _ in range(SET_LINES)]
        self._next = 0

    def _find(self, tag: int) -> CacheLine | None:
        return next((line for line in self.lines if line.matches(tag)), None)

    def contains(self, tag: int) -> bool:
        return self._find(tag) is not None

    def replace_line(self, tag: int, data: Iterable[Element]) -> None:
        self.lines[self._next].fill(tag, data)
        self._next = (self._next + 1) % SET_LINES

    def get_element(self, tag: int, offset: int) -> Element:
        line = self._find(tag)
        if line is None:
            raise KeyError(f"tag {tag} is not cached in this set")
        return line.data[offset]

    def update_element(self, tag: int, offset: int, element: Element) -> None:
        """Overwrite one word of the line holding ``tag``; no-op if absent."""
        line = self._find(tag)
        if line is not None:
            line.update(tag, offset, element)

    def format_lines(self) -> Iterator[str]:
        for line in self.lines:
            yield str(line)


class Cache:
    """The whole cache: ``NUM_SETS`` sets addressed by index."""

    def __init__(self) -> None:
        self.sets = [CacheSet() for _ in range(NUM_SETS)]

    def contains(self, tag: int, index: int) -> bool:
        return self.sets[index].contains(tag)

    def write_line(self, tag: int, index: int, data: Iterable[Element]) -> None:
        self.sets[index].replace_line(tag, data)

    def get_element(self, tag: int, index: int, offset: int) -> Element:
        return self.sets[index].get_element(tag, offset)

    def update_element(self, tag: int, index: int, offset: int, element: Element) -> None:
        self.sets[index].update_element(tag, offset, element)

    def format_lines(self) -> Iterator[str]:
        for number, cache_set in enumerate(self.sets):
            yield f"set {number}:"
            yield from cache_set.format_lines()