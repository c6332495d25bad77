"""Line representation and per-hint candidate windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..core.exceptions import HintOverflowError
from ..core.models import Cell, Window
from ..utils.logger import get_logger
from ..utils.pretty import format_line
from .window import is_valid, split


LOGGER = get_logger(__name__)


@dataclass
class LineConfig:
    """Hints and cell count describing one row or column."""

    hints: Sequence[int]
    length: int

    def __post_init__(self) -> None:
        self.hints = list(self.hints)
        if not isinstance(self.length, int) or self.length <= 0:
            raise ValueError("line length must be a positive integer")
        for value in self.hints:
            if not isinstance(value, int) or value <= 0:
                raise ValueError("hint values must be positive integers")


@dataclass
class Hint:
    """A required run length and the windows where it may still sit."""

    value: int
    windows: List[Window] = field(default_factory=list)

    def is_feasible(self, cells: Sequence[Cell]) -> bool:
        return any(is_valid(window, cells, self.value) for window in self.windows)

    def refine(self, cells: Sequence[Cell]) -> List[Window]:
        """Split every current window once and keep the result."""

        refined: List[Window] = []
        for window in self.windows:
            refined.extend(split(window, cells, self.value))
        LOGGER.debug("Hint %d refined %s -> %s", self.value, self.windows, refined)
        self.windows = refined
        return refined


def slack_for(hints: Sequence[int], length: int) -> int:
    """Cells left over once every run and separator sits at its minimum offset."""

    if not hints:
        return length
    return length - (sum(value + 1 for value in hints) - 1)


def generate_hints(hints: Sequence[int], length: int) -> List[Hint]:
    """Build one hint per run length with its initial candidate window.

    Each run starts at the smallest offset the earlier runs and their
    separators allow, and its window stretches by the shared slack.
    """

    slack = slack_for(hints, length)
    if slack < 0:
        LOGGER.error("Hints %s need %d more cells than the line has", list(hints), -slack)
        raise HintOverflowError(
            f"Hints {list(hints)} do not fit in a line of {length} cells"
        )

    result: List[Hint] = []
    offset = 0
    for value in hints:
        result.append(Hint(value=value, windows=[Window(offset, value + slack)]))
        offset += value + 1

    LOGGER.debug("Generated %d hints for length %d with slack %d", len(result), length, slack)
    return result


class Line:
    """One row or column: its cells plus the hints it must satisfy."""

    def __init__(self, config: LineConfig) -> None:
        self.config = config
        self.cells: List[Cell] = [Cell() for _ in range(config.length)]
        self.hints: List[Hint] = generate_hints(config.hints, config.length)
        self._initial_windows: List[Window] = [hint.windows[0] for hint in self.hints]

    @classmethod
    def from_pattern(cls, hints: Sequence[int], pattern: str) -> "Line":
        """Build a line whose cell states are read from ``pattern``."""

        cells = [Cell.from_symbol(symbol) for symbol in pattern.strip()]
        line = cls(LineConfig(hints=hints, length=len(cells)))
        line.cells = cells
        return line

    @property
    def length(self) -> int:
        return self.config.length

    def cell(self, index: int) -> Cell:
        if not 0 <= index < self.length:
            raise IndexError(f"Cell {index} is outside a line of {self.length} cells")
        return self.cells[index]

    def mark_filled(self, index: int) -> None:
        self.cell(index).mark_filled()

    def mark_empty(self, index: int) -> None:
        self.cell(index).mark_empty()

    def initial_windows(self) -> List[Window]:
        return list(self._initial_windows)

    def is_valid(self, window: Window, hint: int) -> bool:
        return is_valid(window, self.cells, hint)

    def split(self, window: Window, hint: int) -> List[Window]:
        return split(window, self.cells, hint)

    def pattern(self) -> str:
        return format_line(self.cells)
