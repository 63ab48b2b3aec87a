"""Interactive text menu driving the cache simulator."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .address import FILES_PATH
from .cpu import CPU
from .fileio import write_log
from .generator import generate_instructions

_RULE = "-" * 49
_MENU = "\n".join(
    [
        "",
        _RULE,
        "1. Inicializar DRAM desde archivo",
        "2. Generar instrucciones aleatorias",
        "3. Imprimir cache",
        "4. Exportar archivos",
        "5. Salir",
        _RULE,
    ]
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


class App:
    """Menu loop reading whitespace-separated commands from an input stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        files_path: Path | str = FILES_PATH,
        rng: random.Random | None = None,
    ) -> None:
        self._out = stdout
        self._tokens = _tokens(sys.stdin if stdin is None else stdin)
        self.files_path = Path(files_path)
        self.rng = rng
        self.cpu = CPU(out=stdout)

    @property
    def out_path(self) -> Path:
        return self.files_path / "out.txt"

    @property
    def log_path(self) -> Path:
        return self.files_path / "log.txt"

    def _emit(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=sys.stdout if self._out is None else self._out)

    def _next_token(self) -> str:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("no more input")
        return token

    def main_menu(self) -> bool:
        """Show the menu, run one command, and return True when the user quits."""
        self._emit(_MENU)
        try:
            token = self._next_token()
        except EOFError:
            return True
        self._emit()
        try:
            command = int(token)
        except ValueError:
            return False
        actions = {
            1: self.initialize_dram,
            2: self.generate_instructions,
            3: self.print_cache,
            4: self.export_files,
        }
        if command == 5:
            return True
        action = actions.get(command)
        if action is not None:
            try:
                action()
            except Exception as error:
                self._emit(f"Error: {error}")
        return False

    def initialize_dram(self) -> None:
        self._emit(
            "Por favor, coloque el archivo de entrada dentro de la carpeta 'files' "
            "del proyecto."
        )
        self._emit(
            "Luego, escriba el nombre y la extension del archivo "
            "(por ejemplo: example.txt): ",
            end="",
        )
        filename = self._next_token()
        self._emit()
        try:
            self.cpu.load_dram(self.files_path / filename)
        except (OSError, ValueError, IndexError) as error:
            self._emit(f"Error al cargar DRAM: {error}")
        else:
            self._emit("DRAM cargada correctamente.")

    def generate_instructions(self) -> None:
        self._emit("Escriba el numero de instrucciones aleatorias: ")
        count = int(self._next_token())
        self._emit()
        try:
            generate_instructions(self.cpu, count, self.rng)
        except (ValueError, IndexError) as error:
            self._emit(f"Error al generar instrucciones: {error}")
        else:
            self._emit("Instrucciones generadas correctamente.")

    def print_cache(self) -> None:
        self.cpu.print_cache()
        self._emit()

    def export_files(self) -> None:
        self.cpu.export_dram(self.out_path)
        write_log(self.cpu.stats, self.log_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cachesim", description="Interactive cache simulator.")
    parser.add_argument(
        "--files",
        type=Path,
        default=FILES_PATH,
        help="directory holding input files and receiving exported files",
    )
    args = parser.parse_args(argv)
    app = App(files_path=args.files)
    while not app.main_menu():
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())