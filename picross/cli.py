"""CLI entrypoint for inspecting the candidate windows of a single line."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .core.exceptions import PicrossError
from .core.models import Window
from .engine.line import Line, LineConfig
from .utils.logger import configure_logging, get_logger
from .utils.pretty import pretty_print_line


LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute and refine the candidate windows of a nonogram line",
    )
    parser.add_argument(
        "--hints",
        type=int,
        nargs="+",
        required=True,
        metavar="N",
        help="Run lengths of the line, in order",
    )
    parser.add_argument("--length", type=int, help="Number of cells in the line")
    parser.add_argument(
        "--pattern",
        type=str,
        help="Known cell states: '.', '0' or '?' unknown, 'F', '#' or '1' filled, 'X' or '-' empty",
    )
    parser.add_argument(
        "--hint-index",
        type=int,
        help="Only report the hint at this position (0-based)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print a rendering of the line and its windows instead of JSON",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _window_payload(window: Window) -> Dict[str, int]:
    return {"offset": window.offset, "length": window.length}


def build_report(line: Line, hint_index: int | None = None) -> Dict[str, Any]:
    """Check and split the initial window of every hint in ``line``.

    Each hint keeps the refined windows, so the line can be rendered
    afterwards.
    """

    entries: List[Dict[str, Any]] = []
    for index, (hint, window) in enumerate(zip(line.hints, line.initial_windows())):
        if hint_index is not None and index != hint_index:
            continue
        valid = line.is_valid(window, hint.value)
        splits = hint.refine(line.cells)
        entries.append(
            {
                "index": index,
                "hint": hint.value,
                "initial": _window_payload(window),
                "valid": valid,
                "splits": [_window_payload(split) for split in splits],
            }
        )
    return {"length": line.length, "pattern": line.pattern(), "hints": entries}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.length is None and args.pattern is None:
        parser.error("provide --length or --pattern")
    if args.pattern is not None and args.length is not None and len(args.pattern.strip()) != args.length:
        parser.error("--length does not match the number of cells in --pattern")
    if args.hint_index is not None and not 0 <= args.hint_index < len(args.hints):
        parser.error(f"--hint-index must be between 0 and {len(args.hints) - 1}")

    try:
        if args.pattern is not None:
            line = Line.from_pattern(args.hints, args.pattern)
        else:
            line = Line(LineConfig(hints=args.hints, length=args.length))
    except (PicrossError, ValueError) as exc:
        LOGGER.error("Invalid line: %s", exc)
        parser.error(str(exc))

    payload = build_report(line, args.hint_index)

    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.pretty:
        pretty_print_line(line)
    elif not args.output:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
