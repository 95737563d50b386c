"""
Line-oriented terminal I/O for the routerman REPL.

Input is read through prompt_toolkit, tables are rendered with rich and
exports are written with the csv module. Screens only ever talk to the
terminal through the ``Terminal`` class so tests can substitute the reader.
"""

import csv
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from prompt_toolkit import prompt
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .errors import InvalidChoiceError, InvalidInputError

Reader = Callable[[str], str]


class Terminal:
    """Operator terminal: read a line, an integer or a single character."""

    def __init__(self, reader: Optional[Reader] = None, console: Optional[Console] = None):
        self._reader = reader or prompt
        self.console = console or Console(highlight=False)

    def read_line(self, message: str = "") -> str:
        """Read one line of input, stripped of surrounding whitespace."""
        return self._reader(message).strip()

    def read_int(self, message: str, default: int) -> int:
        """
        Read an integer, returning ``default`` on empty input.

        Raises:
            InvalidInputError: The input is not a whole number
        """
        text = self.read_line(message)
        if not text:
            return default
        try:
            return int(text)
        except ValueError:
            raise InvalidInputError(f"'{text}' is not a number") from None

    def read_char_choice(self, message: str, choices: Iterable[str]) -> str:
        """
        Read one of a restricted set of characters (case-insensitive).

        Raises:
            InvalidChoiceError: The input is not one of ``choices``
        """
        text = self.read_line(message).lower()
        if text not in {c.lower() for c in choices}:
            raise InvalidChoiceError()
        return text

    def print_table(self, rows: Sequence[Sequence[object]], numbered: bool = True) -> None:
        """Render rows as a borderless table, optionally numbered from 1."""
        table = Table(show_header=False, box=None, pad_edge=False)
        if numbered:
            table.add_column(justify="right", style="cyan", no_wrap=True)
        width = max((len(row) for row in rows), default=0)
        for _ in range(width):
            table.add_column(no_wrap=True)

        for position, row in enumerate(rows, 1):
            cells = [Text(str(cell)) for cell in row]
            cells.extend([Text("")] * (width - len(cells)))
            if numbered:
                cells.insert(0, Text(f"{position}:"))
            table.add_row(*cells)

        self.console.print(table)

    def write_csv(self, filename: str, rows: Sequence[Sequence[object]]) -> Path:
        """Write rows to ``filename`` as CSV and return the path written."""
        path = Path(filename)
        with open(path, "w", newline="") as f:
            csv.writer(f).writerows(rows)
        return path
