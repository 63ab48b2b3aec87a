import io

import pytest

from cachesim.address import (
    BLOCK_SIZE,
    MEMORY_SIZE,
    NUM_SETS,
    SET_LINES,
    decompose,
)
from cachesim.cpu import CPU
from cachesim.element import Element, ElementType


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def cpu(out):
    return CPU(out=out)


def test_read_miss_then_hit(cpu):
    assert cpu.read(40) is False
    assert cpu.read(40) is True
    assert cpu.stats.read_misses == 1
    assert cpu.stats.read_hits == 1


def test_read_same_block_hits(cpu):
    cpu.read(0)
    assert cpu.read(BLOCK_SIZE - 1) is True
    assert cpu.read(BLOCK_SIZE) is False


def test_read_messages(cpu, out):
    cpu.read(0x1A)
    cpu.read(0x1A)
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("[READ] miss -> Direccion: 0x1a")
    assert lines[0].endswith("Cargando bloque desde DRAM.")
    assert lines[1] == f"[READ] hit -> Direccion: 0x1a, Dato: {Element()}"


def test_write_miss_stores_in_memory_and_cache(cpu):
    element = Element("8", "K", ElementType.COMBINATION)
    assert cpu.write(300, element) is False
    assert cpu.dram.read(300) == element
    fields = decompose(300)
    assert cpu.cache.get_element(fields.tag, fields.index, fields.offset) == element
    assert cpu.stats.write_misses == 1


def test_write_hit_updates_cache(cpu, out):
    cpu.read(64)
    element = Element("R", "0", ElementType.LETTER)
    assert cpu.write(65, element) is True
    fields = decompose(65)
    assert cpu.cache.get_element(fields.tag, fields.index, fields.offset) == element
    assert cpu.dram.read(65) == element
    assert cpu.stats.write_hits == 1
    assert out.getvalue().splitlines()[-1].endswith(f"Dato: {element}")


def test_fifo_eviction_within_set(cpu):
    stride = BLOCK_SIZE * NUM_SETS
    addresses = [stride * k for k in range(SET_LINES + 1)]
    for address in addresses:
        assert cpu.read(address) is False
    assert cpu.read(addresses[0]) is False
    assert cpu.read(addresses[-1]) is True


def test_out_of_range_address(cpu):
    with pytest.raises(IndexError):
        cpu.read(MEMORY_SIZE)
    with pytest.raises(IndexError):
        cpu.write(-1, Element())
    assert cpu.stats.total_accesses == 0


def test_print_cache(cpu, out):
    cpu.print_cache()
    lines = out.getvalue().splitlines()
    assert lines[0] == "set 0:"
    assert len(lines) == NUM_SETS * (SET_LINES + 1)
    assert lines == list(cpu.cache.format_lines())


def test_print_dram(cpu, out):
    cpu.dram.write(1, Element("Z", "0", ElementType.LETTER))
    cpu.print_dram()
    lines = out.getvalue().splitlines()
    assert len(lines) == MEMORY_SIZE
    assert lines[1] == "1 Z"
    assert lines == list(cpu.dram.format_lines())


def test_export_and_load_round_trip(cpu, tmp_path):
    element = Element("2", "M", ElementType.COMBINATION)
    cpu.write(5, element)
    path = tmp_path / "out.txt"
    cpu.export_dram(path)
    other = CPU(out=io.StringIO())
    other.load_dram(path)
    assert other.dram.read(5) == element
    assert list(other.dram.format_lines()) == list(cpu.dram.format_lines())