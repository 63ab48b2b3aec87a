# cachesim

A small interactive simulator of a CPU cache sitting in front of a DRAM.

The simulated machine has:

- a DRAM of 2048 one-word cells, addressed with 11 bits;
- a 4-way set-associative cache with 8 sets and 16-word blocks, which is 32 lines in all;
- addresses split into a 4-bit tag, a 3-bit index and a 4-bit offset;
- write-through writes, a block load on every read or write miss, and first-in-first-out replacement inside each set.

Each memory cell holds an element. An element is a single digit (`7`), a single letter (`Q`), or a combination of two characters, usually a digit and a letter (`3K`). A fresh DRAM and fresh cache lines hold the digit `0` in every cell.

## Installation

```
pip install .
```

## Running

```
cachesim
cachesim --files path/to/files
```

`--files` names the directory that input files are read from and that exported files are written to. It defaults to `../files`, relative to the current directory.

The program shows a menu in Spanish and reads whitespace-separated answers from standard input. It stops on option 5 or when the input ends. A command that is not a number, or a number outside 1 to 5, just shows the menu again.

1. Load the DRAM from a text file in the files directory, given by name. Each line of the file fills one cell, starting at address 0. A line of one character is a digit if it is `0`–`9` and a letter otherwise; a longer line is a combination made from its first two characters. An empty line or a file of more than 2048 lines is reported as an error.
2. Run a given number of random accesses. Each one is a read or a write at a random address; a write stores a random digit, letter or digit-letter combination. Each access prints whether it hit or missed.
3. Print the cache, set by set and line by line, showing the valid bit, the tag and the 16 words of each line.
4. Write the DRAM contents to `out.txt`, one element per line, and the hit and miss statistics to `log.txt`, both in the files directory. `log.txt` is a CSV table with the rows `Accesses`, `Hits`, `Misses`, `Hit Rate` and `Miss Rate` and the columns `Total`, `Read` and `Write`.
5. Quit.

## Using it as a library

```python
import random

from cachesim.cpu import CPU
from cachesim.element import Element
from cachesim.generator import generate_instructions

cpu = CPU()
cpu.write(0x1A3, Element.from_line("4B"))   # returns False: a miss, the block is loaded from DRAM
cpu.read(0x1A3)                             # returns True: a hit
generate_instructions(cpu, 100, random.Random(42))
cpu.print_cache()
print(cpu.stats.total_hit_rate)
```

- `cachesim.cpu.CPU` holds a `cache`, a `dram` and an `AccessStats` in `stats`. `read` and `write` return whether the access hit and raise `IndexError` for an address outside memory. `print_cache` and `print_dram` print to standard output, or to the stream passed as `CPU(out=...)`. `load_dram`, `export_dram` and `export_log` read and write files.
- `cachesim.address.decompose(address)` splits an address into an `AddressFields` with `tag`, `index`, `offset` and `base_address`. The module also holds the machine's geometry constants, such as `MEMORY_SIZE`, `NUM_SETS`, `SET_LINES` and `WORDS_PER_BLOCK`.
- `cachesim.element.Element` is an immutable word with an `ElementType` of `DIGIT`, `LETTER` or `COMBINATION`; `Element.from_line` builds one from a line of text.
- `cachesim.stats.AccessStats` counts read and write hits and misses and gives totals and hit and miss rates; a rate with no accesses behind it is `0.0`.
- `cachesim.dram.DRAM` and `cachesim.cache.Cache` (with `CacheSet` and `CacheLine`) are the two memories on their own.
- `cachesim.fileio` provides `load_dram`, `write_dram` and `write_log`.
- `cachesim.generator.generate_instructions(cpu, count, rng)` issues random accesses; `rng` is an optional `random.Random`.
- `cachesim.app.App` is the menu loop; it takes its input and output streams, the files directory and a random generator as arguments.

## Limits

The cache geometry is fixed in `cachesim.address` and cannot be changed from the command line. The command has no way to seed the random accesses; pass a seeded `random.Random` to `App` or `generate_instructions` from Python for repeatable runs. The DRAM contents can be printed from Python with `CPU.print_dram`, but the menu does not offer it.

## Tests

```
pip install .[test]
pytest
```