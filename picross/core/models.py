"""Data models supporting the line engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .constants import PATTERN_SYMBOLS, CellState
from .exceptions import (
    CellAlreadySolvedError,
    CellUnsolvedError,
    LinePatternError,
    WindowBoundsError,
)


@dataclass
class Cell:
    """A single line position.

    A cell starts out unknown and is solved exactly once, either filled or
    empty. Solving it again, or asking an unknown cell whether it is filled,
    is a bug in the caller and raises.
    """

    _state: CellState = CellState.UNKNOWN

    @property
    def state(self) -> CellState:
        return self._state

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        try:
            return cls(PATTERN_SYMBOLS[symbol.upper()])
        except KeyError:
            raise LinePatternError(f"Unsupported cell symbol {symbol!r}") from None

    def mark_filled(self) -> None:
        self.solve(True)

    def mark_empty(self) -> None:
        self.solve(False)

    def solve(self, filled: bool) -> None:
        if self.is_solved():
            raise CellAlreadySolvedError(f"Cell already solved as {self.state.value}")
        self._state = CellState.FILLED if filled else CellState.EMPTY

    def is_solved(self) -> bool:
        return self.state != CellState.UNKNOWN

    def is_filled(self) -> bool:
        self._require_solved()
        return self.state == CellState.FILLED

    def is_empty(self) -> bool:
        self._require_solved()
        return self.state == CellState.EMPTY

    def _require_solved(self) -> None:
        if not self.is_solved():
            raise CellUnsolvedError("Cell has no solution yet")


@dataclass(frozen=True)
class Window:
    """A contiguous ``(offset, length)`` range of a line.

    Windows never own cells; they reference a slice of the line they were
    computed for.
    """

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def partition(self, cells: Sequence[Cell]) -> Sequence[Cell]:
        """Return the cells covered by the window."""

        if self.offset < 0 or self.length < 0 or self.end > len(cells):
            raise WindowBoundsError(
                f"Window {self.offset}+{self.length} does not fit a line of {len(cells)} cells"
            )
        return cells[self.offset : self.end]

    def shifted(self, delta: int) -> "Window":
        return Window(self.offset + delta, self.length)
