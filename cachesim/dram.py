"""Main memory holding one element per address."""

from __future__ import annotations

from collections.abc import Iterator

from .address import MEMORY_SIZE, WORDS_PER_BLOCK, decompose
from .element import Element


class DRAM:
    """Word-addressed main memory of ``MEMORY_SIZE`` elements."""

    def __init__(self) -> None:
        self._data = [Element() for _ in range(MEMORY_SIZE)]

    @staticmethod
    def _check(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise IndexError(f"address {address} outside memory of size {MEMORY_SIZE}")

    def read(self, address: int) -> Element:
        self._check(address)
        return self._data[address]

    def write(self, address: int, element: Element) -> None:
        self._check(address)
        self._data[address] = element

    def get_block(self, address: int) -> list[Element]:
        """Return the whole block that contains ``address``."""
        self._check(address)
        base = decompose(address).base_address
        return self._data[base : base + WORDS_PER_BLOCK]

    def format_lines(self) -> Iterator[str]:
        """Yield one ``"<address> <element>"`` line per memory word."""
        for address, element in enumerate(self._data):
            yield f"{address} {element}"