"""Feasibility checks and splitting of candidate windows."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..core.models import Cell, Window
from ..utils.logger import get_logger
from .range_queue import Capture, RangeQueue


LOGGER = get_logger(__name__)


def _require_positive(hint: int) -> None:
    if hint <= 0:
        raise ValueError(f"Hint length must be positive, got {hint}")


def is_valid(window: Window, cells: Sequence[Cell], hint: int) -> bool:
    """Return whether a run of ``hint`` cells can still be held by ``window``.

    The check works at window level: any empty cell rejects the window, and
    the filled cells must be close enough to each other and to the window
    edges for a single run to cover them. A window shorter than the run is
    never valid.
    """

    _require_positive(hint)
    nodes = window.partition(cells)
    if len(nodes) < hint:
        return False
    min_filled = None
    max_filled = None

    for index, cell in enumerate(nodes):
        if not cell.is_solved():
            continue
        if cell.is_empty():
            return False
        if min_filled is None:
            # First filled cell out of reach of a run starting at the window edge
            if index >= hint:
                return False
            min_filled = index
        elif index - min_filled >= hint:
            return False
        else:
            max_filled = index

    if max_filled is not None and (len(nodes) - max_filled > hint or max_filled > hint):
        return False
    return True


def split(window: Window, cells: Sequence[Cell], hint: int) -> List[Window]:
    """Split ``window`` into the sub-windows that can still host the run.

    Every returned window is a maximal range over which a run of ``hint``
    cells can slide one cell at a time without covering an empty cell or
    touching a filled cell at either end. Windows come back in scan order
    with absolute offsets; an empty list means no placement is left.
    """

    _require_positive(hint)
    nodes = window.partition(cells)
    splits: List[Window] = []
    ranges = RangeQueue()

    def collect(captures: Iterable[Capture]) -> None:
        for offset, length in captures:
            splits.append(Window(window.offset + offset, length))

    # First run start that has not been decided yet
    low = 0

    for index, cell in enumerate(nodes):
        if not cell.is_solved():
            continue

        if cell.is_empty():
            if index - low >= hint:
                if ranges:
                    captures, _ = ranges.harvest(hint, low, index, pop_all=True)
                    collect(captures)
                else:
                    collect([(low, index - low)])
            ranges.clear()
            low = index + 1
            continue

        span = index - low
        if span == hint:
            # A run starting at ``low`` would touch this cell
            front = ranges.front()
            if front is not None and front[0] == low:
                ranges.pop()
                low = front[1] + 2
            else:
                low += 1
        elif span > hint:
            if ranges:
                captures, low = ranges.harvest(hint, low, index, pop_all=False)
                collect(captures)
            else:
                # Nothing pending: everything up to the cell before this one is free
                collect([(low, index - 1 - low)])
                low = index - hint + 1
        LOGGER.debug("filled cell at %d, next undecided start %d", index, low)
        ranges.extend(index)

    captures, _ = ranges.harvest(hint, low, len(nodes), pop_all=True)
    collect(captures)

    LOGGER.debug("split %s for hint %d -> %s", window, hint, splits)
    return splits
