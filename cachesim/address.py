"""Memory geometry and decomposition of addresses into tag, index and offset."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

MEMORY_SIZE = 2048
ADDRESS_BITS = int(math.log2(MEMORY_SIZE))
WORD_SIZE = 1
BLOCK_SIZE = 16
TOTAL_BLOCKS = 32
SET_LINES = 4
NUM_SETS = TOTAL_BLOCKS // SET_LINES
CACHE_SIZE = NUM_SETS
INDEX_BITS = int(math.log2(NUM_SETS))
OFFSET_BITS = int(math.log2(BLOCK_SIZE))
TAG_BITS = ADDRESS_BITS - (INDEX_BITS + OFFSET_BITS)
WORDS_PER_BLOCK = BLOCK_SIZE // WORD_SIZE
MUX_SELECTOR = int(math.log2(WORDS_PER_BLOCK))

FILES_PATH = Path("..") / "files"
OUT_PATH = FILES_PATH / "out.txt"
LOG_PATH = FILES_PATH / "log.txt"


@dataclass(frozen=True)
class AddressFields:
    """The cache-relevant fields of one memory address."""

    tag: int
    index: int
    offset: int
    base_address: int


def decompose(address: int) -> AddressFields:
    """Split an address into tag, set index, block offset and block base address."""
    if address < 0:
        raise ValueError(f"address must be non-negative, got {address}")
    offset = address & ((1 << OFFSET_BITS) - 1)
    index = (address >> OFFSET_BITS) & ((1 << INDEX_BITS) - 1)
    tag = address >> (OFFSET_BITS + INDEX_BITS)
    return AddressFields(tag=tag, index=index, offset=offset, base_address=address - offset)