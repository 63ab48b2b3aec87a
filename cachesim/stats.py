"""Hit and miss counters for cache accesses."""

from __future__ import annotations

from dataclasses import dataclass


def _rate(part: int, whole: int) -> float:
    return 0.0 if whole == 0 else part / whole


@dataclass
class AccessStats:
    """Counts read and write hits and misses and derives rates from them."""

    read_hits: int = 0
    read_misses: int = 0
    write_hits: int = 0
    write_misses: int = 0

    def record_read(self, hit: bool) -> None:
        if hit:
            self.read_hits += 1
        else:
            self.read_misses += 1

    def record_write(self, hit: bool) -> None:
        if hit:
            self.write_hits += 1
        else:
            self.write_misses += 1

    @property
    def read_accesses(self) -> int:
        return self.read_hits + self.read_misses

    @property
    def write_accesses(self) -> int:
        return self.write_hits + self.write_misses

    @property
    def total_hits(self) -> int:
        return self.read_hits + self.write_hits

    @property
    def total_misses(self) -> int:
        return self.read_misses + self.write_misses

    @property
    def total_accesses(self) -> int:
        return self.read_accesses + self.write_accesses

    @property
    def total_hit_rate(self) -> float:
        return _rate(self.total_hits, self.total_accesses)

    @property
    def total_miss_rate(self) -> float:
        return _rate(self.total_misses, self.total_accesses)

    @property
    def read_hit_rate(self) -> float:
        return _rate(self.read_hits, self.read_accesses)

    @property
    def read_miss_rate(self) -> float:
        return _rate(self.read_misses, self.read_accesses)

    @property
    def write_hit_rate(self) -> float:
        return _rate(self.write_hits, self.write_accesses)

    @property
    def write_miss_rate(self) -> float:
        return _rate(self.write_misses, self.write_accesses)