"""Single-line candidate-window engine for nonogram (picross) puzzles.

This package exposes the public API surface via:

- ``picross.engine.line.Line``: cells and hints of one row or column.
- ``picross.engine.line.generate_hints``: initial candidate windows.
- ``picross.engine.window.is_valid`` / ``split``: window feasibility and
  refinement against the known cell states.

The board-level solver that drives these calls across a grid is not part
of this package.
"""

from .core.constants import CellState
from .core.models import Cell, Window
from .engine.line import Hint, Line, LineConfig, generate_hints
from .engine.window import is_valid, split

__all__ = [
    "Cell",
    "CellState",
    "Hint",
    "Line",
    "LineConfig",
    "Window",
    "generate_hints",
    "is_valid",
    "split",
]

__version__ = "0.1.0"
