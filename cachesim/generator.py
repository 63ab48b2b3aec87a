"""Random read/write workloads for the simulated processor."""

from __future__ import annotations

import random

from .address import MEMORY_SIZE
from .cpu import CPU
from .element import Element, ElementType


def _random_char(rng: random.Random, low: str, high: str) -> str:
    return chr(rng.randint(ord(low), ord(high)))


def generate_instructions(cpu: CPU, count: int, rng: random.Random | None = None) -> None:
    """Issue ``count`` random reads and writes of random elements on ``cpu``."""
    if count < 0:
        raise ValueError(f"instruction count must be non-negative, got {count}")
    if rng is None:
        rng = random.Random()
    for _ in range(count):
        address = rng.randint(0, MEMORY_SIZE - 1)
        if rng.randint(0, 1) == 0:
            cpu.read(address)
            continue
        kind = rng.randint(0, 2)
        if kind == 0:
            element = Element(_random_char(rng, "0", "9"), "0", ElementType.DIGIT)
        elif kind == 1:
            element = Element(_random_char(rng, "A", "Z"), "0", ElementType.LETTER)
        else:
            digit = _random_char(rng, "0", "9")
            letter = _random_char(rng, "A", "Z")
            element = Element(digit, letter, ElementType.COMBINATION)
        cpu.write(address, element)