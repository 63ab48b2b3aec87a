"""A processor issuing reads and writes through the cache to main memory."""

from __future__ import annotations

import sys
from typing import TextIO

from .address import LOG_PATH, MEMORY_SIZE, OUT_PATH, decompose
from .cache import Cache
from .dram import DRAM
from .element import Element
from .fileio import StrPath, load_dram, write_dram, write_log
from .stats import AccessStats


class CPU:
    """Drives a write-through cache in front of a DRAM and counts hits and misses."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.cache = Cache()
        self.dram = DRAM()
        self.stats = AccessStats()
        self._out = out

    def _emit(self, text: str = "") -> None:
        print(text, file=sys.stdout if self._out is None else self._out)

    @staticmethod
    def _check(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise IndexError(f"address {address} outside memory of size {MEMORY_SIZE}")

    def load_dram(self, path: StrPath) -> None:
        load_dram(self.dram, path)

    def export_dram(self, path: StrPath = OUT_PATH) -> None:
        write_dram(self.dram, path)

    def export_log(self, path: StrPath = LOG_PATH) -> None:
        write_log(self.stats, path)

    def read(self, address: int) -> bool:
        """Read ``address``; on a miss the block is loaded. Returns whether it hit."""
        self._check(address)
        fields = decompose(address)
        hit = self.cache.contains(fields.tag, fields.index)
        self.stats.record_read(hit)
        if hit:
            element = self.cache.get_element(fields.tag, fields.index, fields.offset)
            self._emit(f"[READ] hit -> Direccion: 0x{address:x}, Dato: {element}")
        else:
            self._emit(
                f"[READ] miss -> Direccion: 0x{address:x}. Cargando bloque desde DRAM."
            )
            self.cache.write_line(fields.tag, fields.index, self.dram.get_block(address))
        return hit

    def write(self, address: int, element: Element) -> bool:
        """Write ``element`` through to memory and the cache. Returns whether it hit."""
        self._check(address)
        fields = decompose(address)
        self.dram.write(address, element)
        hit = self.cache.contains(fields.tag, fields.index)
        self.stats.record_write(hit)
        if hit:
            self._emit(f"[WRITE] hit -> Direccion: 0x{address:x}, Dato: {element}")
            self.cache.update_element(fields.tag, fields.index, fields.offset, element)
        else:
            self._emit(
                f"[WRITE] miss -> Direccion: 0x{address:x}, Dato: {element}. "
                "Cargando bloque desde DRAM."
            )
            self.cache.write_line(fields.tag, fields.index, self.dram.get_block(address))
        return hit

    def print_cache(self) -> None:
        for line in self.cache.format_lines():
            self._emit(line)

    def print_dram(self) -> None:
        for line in self.dram.format_lines():
            self._emit(line)