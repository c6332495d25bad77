"""Shared constants and enumerations for the line engine."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class CellState(str, Enum):
    """Tri-state value of a single line cell."""

    UNKNOWN = "UNKNOWN"
    FILLED = "FILLED"
    EMPTY = "EMPTY"


# Accepted characters when reading a line from text. Letters are matched
# case-insensitively.
PATTERN_SYMBOLS: Dict[str, CellState] = {
    ".": CellState.UNKNOWN,
    "0": CellState.UNKNOWN,
    "?": CellState.UNKNOWN,
    "F": CellState.FILLED,
    "#": CellState.FILLED,
    "1": CellState.FILLED,
    "X": CellState.EMPTY,
    "-": CellState.EMPTY,
}

# Characters used when rendering a line.
RENDER_SYMBOLS: Dict[CellState, str] = {
    CellState.UNKNOWN: ".",
    CellState.FILLED: "#",
    CellState.EMPTY: "X",
}
