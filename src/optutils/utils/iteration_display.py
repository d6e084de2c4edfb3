"""
Table-like iteration logs for long-running loops.

A display holds an ordered set of columns and the values of the current row.
The caller drives the cadence with its own iteration counter:

    display = IterationDisplay()
    display.add_column("iter", priority=0, width=6)
    display.add_column("obj", priority=1, width=12)
    for k in range(n):
        display.reset_iteration()
        ...
        display.set("iter", k)
        display.set("obj", value, precision=4)
        if display.need_header(k):
            display.print_header(sys.stdout)
        if display.need_print(k):
            display.print_iteration(sys.stdout)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TextIO, Tuple

from rich.console import Console
from rich.text import Text

from .enforce import check_invariant

DEFAULT_HEADER_INTERVAL = 100
DEFAULT_ITERATION_INTERVAL = 10
DEFAULT_PRECISION = 2


@dataclass
class Column:
    """A column of the iteration table."""
    name: str
    priority: int = 0
    width: int = 10
    visible: bool = True
    default: str = "-"


class IterationDisplay:
    """Prints periodic progress tables to a text stream."""

    def __init__(self, header_interval: int = DEFAULT_HEADER_INTERVAL,
                 iteration_interval: int = DEFAULT_ITERATION_INTERVAL):
        check_invariant(header_interval > 0, "header_interval must be positive")
        check_invariant(iteration_interval > 0, "iteration_interval must be positive")
        self.header_interval = header_interval
        self.iteration_interval = iteration_interval
        self._columns: Dict[int, Column] = {}  # priority -> column
        self._current: Dict[str, Tuple[Any, Optional[int]]] = {}
        self._marked = False

    @classmethod
    def from_config(cls, config) -> "IterationDisplay":
        """Build a display using the intervals of an optutils Config."""
        return cls(header_interval=config.header_interval,
                   iteration_interval=config.iteration_interval)

    @property
    def columns(self) -> List[Column]:
        """Columns in print order."""
        return [self._columns[p] for p in sorted(self._columns)]

    def add_column(self, name: str, priority: int = 0, width: int = 10,
                   visible: bool = True, default: str = "-") -> bool:
        """
        Add a column.

        A column already holding the same priority is replaced.

        Returns:
            False if a column with this name exists, True otherwise
        """
        check_invariant(width > 0, f"Column '{name}' needs a positive width")
        if any(c.name == name for c in self._columns.values()):
            return False
        self._columns[priority] = Column(name, priority, width, visible, default)
        return True

    def remove_column(self, name: str) -> None:
        for priority in [p for p, c in self._columns.items() if c.name == name]:
            del self._columns[priority]

    def set_visible(self, name: str, visible: bool) -> None:
        for column in self._columns.values():
            if column.name == name:
                column.visible = visible

    def need_header(self, k: int) -> bool:
        return k % self.header_interval == 0

    def need_print(self, k: int) -> bool:
        return self._marked or k % self.iteration_interval == 0

    def mark_iteration(self) -> None:
        """Force the current row to be printed regardless of the interval."""
        self._marked = True

    def reset_iteration(self) -> None:
        self._current.clear()
        self._marked = False

    def set(self, name: str, value: Any, precision: Optional[int] = None) -> None:
        """Set the value of a column for the current row."""
        self._current[name] = (value, precision)

    def _format(self, column: Column) -> str:
        if column.name not in self._current:
            return f"{column.default:>{column.width}}"
        value, precision = self._current[column.name]
        if isinstance(value, float):
            if precision is None:
                precision = DEFAULT_PRECISION
            return f"{value:>{column.width}.{precision}f}"
        return f"{str(value):>{column.width}}"

    def _write(self, out: TextIO, line: str, style: str = "") -> None:
        console = Console(file=out, highlight=False, emoji=False, soft_wrap=True)
        console.print(Text(line, style=style))

    def print_header(self, out: TextIO) -> None:
        if not self._columns:
            return
        line = "".join(f"{c.name:>{c.width}}" for c in self.columns if c.visible)
        self._write(out, line, style="bold")

    def print_iteration(self, out: TextIO) -> None:
        if not self._columns:
            return
        line = "".join(self._format(c) for c in self.columns if c.visible)
        self._write(out, line)
