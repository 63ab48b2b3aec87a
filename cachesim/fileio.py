"""Reading and writing memory images and access-statistics reports."""

from __future__ import annotations

from os import PathLike
from typing import Union

from .address import LOG_PATH, MEMORY_SIZE, OUT_PATH
from .dram import DRAM
from .element import Element
from .stats import AccessStats

StrPath = Union[str, "PathLike[str]"]

LOG_HEADER = "Metric,Total,Read,Write"


def load_dram(dram: DRAM, path: StrPath) -> None:
    """Fill ``dram`` from a text file holding one element per line, from address 0."""
    with open(path, encoding="utf-8") as handle:
        for address, line in enumerate(handle):
            dram.write(address, Element.from_line(line.rstrip("\n")))


def write_dram(dram: DRAM, path: StrPath = OUT_PATH) -> None:
    """Write every memory word to ``path``, one element per line."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{dram.read(address)}\n" for address in range(MEMORY_SIZE))


def _format(value: int | float) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def write_log(stats: AccessStats, path: StrPath = LOG_PATH) -> None:
    """Write the access counters and rates of ``stats`` as a small CSV table."""
    rows = [
        ("Accesses", stats.total_accesses, stats.read_accesses, stats.write_accesses),
        ("Hits", stats.total_hits, stats.read_hits, stats.write_hits),
        ("Misses", stats.total_misses, stats.read_misses, stats.write_misses),
        ("Hit Rate", stats.total_hit_rate, stats.read_hit_rate, stats.write_hit_rate),
        ("Miss Rate", stats.total_miss_rate, stats.read_miss_rate, stats.write_miss_rate),
    ]
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(LOG_HEADER + "\n")
        for label, *values in rows:
            handle.write(",".join([label, *(_format(v) for v in values)]) + "\n")