"""Pretty-print helpers for lines and candidate windows."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Sequence

from ..core.constants import RENDER_SYMBOLS

if TYPE_CHECKING:
    from ..core.models import Cell, Window
    from ..engine.line import Hint, Line


def format_line(cells: Sequence[Cell]) -> str:
    return "".join(RENDER_SYMBOLS[cell.state] for cell in cells)


def format_window(window: Window, length: int) -> str:
    """Draw a bar under the cells covered by ``window``."""

    covered = min(window.end, length) - window.offset
    return " " * window.offset + "=" * max(covered, 0) + " " * max(length - window.end, 0)


def format_hint(hint: Hint, cells: Sequence[Cell]) -> str:
    length = len(cells)
    lines: List[str] = [f"hint {hint.value}: {len(hint.windows)} window(s)"]
    for window in hint.windows:
        bar = format_window(window, length)
        lines.append(f"  {bar}  offset={window.offset} length={window.length}")
    return "\n".join(lines)


def pretty_print_line(line: Line, *, label: str | None = None, stream=None) -> None:
    """Print the line followed by every hint and its windows."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(f"  {line.pattern()}", file=stream)
    for hint in line.hints:
        print(format_hint(hint, line.cells), file=stream)
