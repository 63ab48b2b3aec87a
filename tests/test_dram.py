import pytest

from cachesim.address import MEMORY_SIZE, WORDS_PER_BLOCK, decompose
from cachesim.dram import DRAM
from cachesim.element import Element


def test_new_memory_holds_default_elements():
    dram = DRAM()
    assert dram.read(0) == Element()
    assert dram.read(MEMORY_SIZE - 1) == Element()


def test_write_then_read():
    dram = DRAM()
    elem = Element.from_line("4C")
    dram.write(100, elem)
    assert dram.read(100) == elem
    assert dram.read(101) == Element()


@pytest.mark.parametrize("address", [-1, MEMORY_SIZE])
def test_out_of_range_addresses_rejected(address):
    dram = DRAM()
    with pytest.raises(IndexError):
        dram.read(address)
    with pytest.raises(IndexError):
        dram.write(address, Element())
    with pytest.raises(IndexError):
        dram.get_block(address)


def test_block_contains_written_element_at_offset():
    dram = DRAM()
    address = 5 * WORDS_PER_BLOCK + 7
    elem = Element.from_line("Q")
    dram.write(address, elem)
    block = dram.get_block(address)
    assert len(block) == WORDS_PER_BLOCK
    assert block[decompose(address).offset] == elem


def test_every_address_in_block_yields_same_block():
    dram = DRAM()
    base = 9 * WORDS_PER_BLOCK
    for offset, line in enumerate("0123456789ABCDEF"):
        dram.write(base + offset, Element.from_line(line))
    expected = dram.get_block(base)
    for offset in range(WORDS_PER_BLOCK):
        assert dram.get_block(base + offset) == expected
    assert [str(e) for e in expected] == list("0123456789ABCDEF")


def test_block_is_a_copy():
    dram = DRAM()
    block = dram.get_block(0)
    block[0] = Element.from_line("Z")
    assert dram.read(0) == Element()


def test_format_lines():
    dram = DRAM()
    dram.write(2, Element.from_line("8K"))
    lines = list(dram.format_lines())
    assert len(lines) == MEMORY_SIZE
    assert lines[0] == "0 0"
    assert lines[2] == "2 8K"